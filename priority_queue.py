# priority_queue.py
from __future__ import annotations

from heapq import heappush, heappop
from itertools import count
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-priority queue without decrease-key.

    Equal priorities come out in arrival order: each entry carries a
    monotonically increasing sequence number as the heap tie-breaker.
    The same element may be enqueued several times; callers that need
    "latest priority wins" filter stale entries with a visited set.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._seq = count()

    def enqueue(self, element: T, priority: float) -> None:
        heappush(self._heap, (priority, next(self._seq), element))

    def dequeue(self) -> T:
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        _, _, element = heappop(self._heap)
        return element

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
