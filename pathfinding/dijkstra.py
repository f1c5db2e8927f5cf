# pathfinding/dijkstra.py
from __future__ import annotations

from math import inf
from time import perf_counter
from typing import Dict, List, Optional, Set

from graph_model import Graph
from priority_queue import PriorityQueue
from .base import AlgorithmResult, PathfindingAlgorithm, PathStep, reconstruct_path


class DijkstraPlanner(PathfindingAlgorithm):
    """
    Dijkstra on an unweighted graph (every edge costs 1).

    Works on grid mazes and general graphs alike. Each state transition
    is appended to the trace as it happens:

      current  - node popped from the queue and finalized
      visiting - neighbor whose tentative distance just improved
      visited  - all neighbors of the current node relaxed
      path     - one event per node of the final path, start to goal
    """

    name = "Dijkstra"

    def __init__(self) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ---- stats API ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1

    # ---- main planning API ----

    def plan(self, graph: Graph, start: str, goal: str) -> AlgorithmResult:
        t0 = perf_counter()

        dist: Dict[str, float] = {nid: inf for nid in graph.nodes}
        previous: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
        visited: Set[str] = set()
        steps: List[PathStep] = []
        pq: PriorityQueue[str] = PriorityQueue()

        dist[start] = 0
        pq.enqueue(start, 0)

        while not pq.is_empty():
            cur = pq.dequeue()

            # stale duplicate from an earlier, worse enqueue
            if cur in visited:
                continue
            visited.add(cur)

            steps.append(PathStep(cur, "current", distance=dist[cur]))

            if cur == goal:
                break

            node = graph.nodes.get(cur)
            if node is None:
                continue

            cur_dist = dist[cur]
            for nb in node.neighbors:
                if nb in visited:
                    continue
                new_dist = cur_dist + 1
                if new_dist < dist.get(nb, inf):
                    dist[nb] = new_dist
                    previous[nb] = cur
                    pq.enqueue(nb, new_dist)
                    steps.append(PathStep(nb, "visiting", distance=new_dist))

            steps.append(PathStep(cur, "visited", distance=cur_dist))

        path = reconstruct_path(previous, start, goal)
        steps.extend(PathStep(nid, "path") for nid in path)

        dt = perf_counter() - t0
        self._update_stats(dt)
        return AlgorithmResult(
            path=path,
            steps=steps,
            found=bool(path) and path[-1] == goal,
        )


ALGORITHM = DijkstraPlanner()


def dijkstra(graph: Graph, start: str, goal: str) -> AlgorithmResult:
    return ALGORITHM.plan(graph, start, goal)
