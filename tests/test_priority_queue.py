"""Tests for the stale-entry priority queue."""

import pytest

from priority_queue import PriorityQueue


class TestOrdering:
    """Ascending priority, stable among equals."""

    def test_dequeues_in_priority_order(self):
        pq = PriorityQueue()
        for element, priority in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
            pq.enqueue(element, priority)
        assert [pq.dequeue() for _ in range(4)] == ["a", "b", "c", "d"]

    def test_equal_priorities_keep_arrival_order(self):
        pq = PriorityQueue()
        pq.enqueue("first", 1)
        pq.enqueue("x", 0)
        pq.enqueue("second", 1)
        pq.enqueue("third", 1)
        assert [pq.dequeue() for _ in range(4)] == ["x", "first", "second", "third"]

    def test_duplicates_are_kept(self):
        """No decrease-key: re-enqueueing adds a second entry."""
        pq = PriorityQueue()
        pq.enqueue("n", 5)
        pq.enqueue("n", 2)
        assert pq.size() == 2
        assert pq.dequeue() == "n"
        assert pq.dequeue() == "n"

    def test_float_priorities(self):
        pq = PriorityQueue()
        pq.enqueue("inf", float("inf"))
        pq.enqueue("half", 0.5)
        assert pq.dequeue() == "half"


class TestSizeQueries:
    """is_empty / size / len."""

    def test_empty_queue(self):
        pq = PriorityQueue()
        assert pq.is_empty()
        assert pq.size() == 0
        assert len(pq) == 0

    def test_size_tracks_operations(self):
        pq = PriorityQueue()
        pq.enqueue("a", 1)
        pq.enqueue("b", 1)
        assert not pq.is_empty()
        assert len(pq) == 2
        pq.dequeue()
        assert pq.size() == 1

    def test_dequeue_empty_raises(self):
        with pytest.raises(IndexError):
            PriorityQueue().dequeue()
