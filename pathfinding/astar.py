# pathfinding/astar.py
from __future__ import annotations

from math import inf
from time import perf_counter
from typing import Dict, List, Optional, Set

from graph_model import Graph, parse_key
from priority_queue import PriorityQueue
from .base import AlgorithmResult, PathfindingAlgorithm, PathStep, reconstruct_path


def manhattan(a: str, b: str) -> int:
    ax, ay = parse_key(a)
    bx, by = parse_key(b)
    return abs(ax - bx) + abs(ay - by)


class AStarPlanner(PathfindingAlgorithm):
    """
    A* path planner on a grid maze.
    Uses Manhattan distance between "x,y" ids as heuristic, so paths are
    still optimal (same length as Dijkstra) but usually found with fewer
    expansions.

    Only meaningful for grid graphs: ids that are not "x,y" pairs make the
    heuristic raise ValueError.
    """

    name = "AStar"

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
        """
        Returns the path from start to goal (inclusive) plus the trace,
        or an empty path if the goal is unreachable.
        """
        t0 = perf_counter()

        def heuristic(nid: str) -> int:
            return manhattan(nid, goal)

        g_cost: Dict[str, float] = {nid: inf for nid in graph.nodes}
        f_cost: Dict[str, float] = {nid: inf for nid in graph.nodes}
        parent: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
        closed: Set[str] = set()
        steps: List[PathStep] = []
        open_pq: PriorityQueue[str] = PriorityQueue()

        h0 = heuristic(start)
        g_cost[start] = 0
        f_cost[start] = h0
        open_pq.enqueue(start, h0)

        while not open_pq.is_empty():
            cur = open_pq.dequeue()

            if cur in closed:
                continue
            closed.add(cur)

            g_cur = g_cost[cur]
            f_cur = f_cost[cur]
            h_cur = heuristic(cur)
            steps.append(PathStep(cur, "current", distance=g_cur, heuristic=h_cur, f_score=f_cur))

            if cur == goal:
                break

            node = graph.nodes.get(cur)
            if node is None:
                continue

            for np in node.neighbors:
                if np in closed:
                    continue

                new_g = g_cur + 1  # unit-cost graph

                if new_g < g_cost.get(np, inf):
                    parent[np] = cur
                    g_cost[np] = new_g
                    h = heuristic(np)
                    f = new_g + h
                    f_cost[np] = f
                    open_pq.enqueue(np, f)
                    steps.append(PathStep(np, "visiting", distance=new_g, heuristic=h, f_score=f))

            steps.append(PathStep(cur, "visited", distance=g_cur, heuristic=h_cur, f_score=f_cur))

        path = reconstruct_path(parent, start, goal)
        steps.extend(PathStep(nid, "path") for nid in path)

        dt = perf_counter() - t0
        self._update_stats(dt)
        return AlgorithmResult(
            path=path,
            steps=steps,
            found=bool(path) and path[-1] == goal,
        )


ALGORITHM = AStarPlanner()


def astar(graph: Graph, start: str, goal: str) -> AlgorithmResult:
    return ALGORITHM.plan(graph, start, goal)
