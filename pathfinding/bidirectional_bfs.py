# pathfinding/bidirectional_bfs.py
from __future__ import annotations

from collections import deque
from time import perf_counter
from typing import Deque, Dict, List, Optional

from graph_model import Graph
from .base import BFSResult, BFSStep, PathfindingAlgorithm, Side

Path = List[str]


class BidirectionalBFSPlanner(PathfindingAlgorithm):
    """
    Bidirectional breadth-first search on an unweighted graph.

    One frontier grows from start, one from goal. Each outer iteration
    expands one *full level* on the forward side, then one full level on
    the backward side, so both sides advance in lock-step and the first
    meeting yields a shortest path in hop count.

    Every discovered node stores the whole path from its origin, which
    makes stitching the two halves trivial.
    """

    name = "BidirectionalBFS"

    def __init__(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def plan(self, graph: Graph, start: str, goal: str) -> BFSResult:
        t0 = perf_counter()
        result = self._search(graph, start, goal)
        dt = perf_counter() - t0
        self._update_stats(dt)
        return result

    def _search(self, graph: Graph, start: str, goal: str) -> BFSResult:
        steps: List[BFSStep] = [
            BFSStep(start, "start-forward", side="forward", level=0),
            BFSStep(goal, "start-backward", side="backward", level=0),
        ]

        if start == goal:
            steps.append(BFSStep(start, "path"))
            return BFSResult(path=[start], steps=steps, found=True, intersection_node=start)

        fwd_queue: Deque[Path] = deque([[start]])
        fwd_seen: Dict[str, Path] = {start: [start]}
        bwd_queue: Deque[Path] = deque([[goal]])
        bwd_seen: Dict[str, Path] = {goal: [goal]}

        level = 0
        while fwd_queue and bwd_queue:
            level += 1

            hit = self._expand_level(graph, fwd_queue, fwd_seen, bwd_seen, "forward", level, steps)
            if hit is not None:
                return hit

            hit = self._expand_level(graph, bwd_queue, bwd_seen, fwd_seen, "backward", level, steps)
            if hit is not None:
                return hit

        return BFSResult(path=[], steps=steps, found=False)

    def _expand_level(
        self,
        graph: Graph,
        queue: Deque[Path],
        own_seen: Dict[str, Path],
        other_seen: Dict[str, Path],
        side: Side,
        level: int,
        steps: List[BFSStep],
    ) -> Optional[BFSResult]:
        """
        Expand every path currently in `queue` (exactly one BFS level).
        Returns a found result on the first meeting with the other side.
        """
        next_level: List[Path] = []

        for _ in range(len(queue)):
            cur_path = queue.popleft()
            cur = cur_path[-1]

            steps.append(BFSStep(cur, f"current-{side}", side=side, level=level))

            node = graph.nodes.get(cur)
            if node is None:
                continue

            for nb in node.neighbors:
                # intersection check comes before the novelty check
                if nb in other_seen:
                    other_path = other_seen[nb]
                    if side == "forward":
                        full = cur_path + other_path[::-1]
                    else:
                        full = other_path + cur_path[::-1]

                    steps.append(BFSStep(nb, "intersection", side=side, level=level))
                    steps.extend(BFSStep(nid, "path") for nid in full)
                    return BFSResult(path=full, steps=steps, found=True, intersection_node=nb)

                if nb not in own_seen:
                    new_path = cur_path + [nb]
                    own_seen[nb] = new_path
                    next_level.append(new_path)
                    steps.append(BFSStep(nb, f"goal-{side}", side=side, level=level))

            steps.append(BFSStep(cur, f"visited-{side}", side=side, level=level))

        queue.extend(next_level)
        return None

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1


ALGORITHM = BidirectionalBFSPlanner()


def bidirectional_bfs(graph: Graph, start: str, goal: str) -> BFSResult:
    return ALGORITHM.plan(graph, start, goal)
