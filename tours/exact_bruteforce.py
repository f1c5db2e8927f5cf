# tours/exact_bruteforce.py
from __future__ import annotations

from time import perf_counter
from math import inf
from itertools import permutations
from typing import List, Optional, Sequence

from graph_model import Graph
from pathfinding.base import PathfindingAlgorithm
from pathfinding.bidirectional_bfs import BidirectionalBFSPlanner
from .base import PairPaths, TourAlgorithm, TourResult, TourStep


class ExactBruteForceTour(TourAlgorithm):
    """
    Exact open-tour solver for small goal sets.

    Given:
      - start node
      - a list of goals [g1, ..., gk]

    It:
      - computes shortest paths between every ordered pair drawn from
        {start} + goals using the injected pathfinding algorithm
        (bidirectional BFS unless told otherwise)
      - brute-forces all permutations of the goals, stitching the
        precomputed segments into one node path per permutation
      - returns the shortest stitched path; ties keep the permutation
        that was evaluated first.

    An empty goal list is a tour with no legs: found, with an empty path.

    This is exponential in k!, so we restrict to small k.
    """

    name = "ExactBruteForce"

    def __init__(self, max_targets: int = 10) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

        # pathfinding algorithm (injected); own instance, so segment
        # searches stay out of the registry planner stats
        self.path_algo: Optional[PathfindingAlgorithm] = BidirectionalBFSPlanner()

        # safety limit for brute force
        self.max_targets: int = max_targets

    # ---- timing ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1

    # ---- dependency injection ----

    def set_path_algo(self, algo: Optional[PathfindingAlgorithm]) -> None:
        self.path_algo = algo

    # ---- main solver ----

    def solve(
        self,
        graph: Graph,
        start: str,
        goals: List[str],
    ) -> TourResult:
        t0 = perf_counter()

        if self.path_algo is None:
            raise RuntimeError(
                "ExactBruteForceTour.path_algo is not set. "
                "Inject a pathfinding algorithm via set_path_algo()."
            )

        goals = list(goals)
        n = len(goals)

        if n > self.max_targets:
            raise ValueError(
                f"ExactBruteForceTour supports at most {self.max_targets} "
                f"goals per call, got {n}."
            )

        all_paths = self._pairwise_paths(graph, [start] + goals)

        best_len = inf
        best_path: List[str] = []
        best_order: List[str] = []
        tested: List[TourStep] = []

        for perm in permutations(goals):
            order = list(perm)
            path = self._stitch(all_paths, [start] + order)
            if path is None:
                continue

            tested.append(TourStep("tour-test", order, path))

            if len(path) < best_len:
                best_len = len(path)
                best_path = path
                best_order = order

        steps = list(tested)
        found = best_len < inf
        if found:
            steps.append(TourStep("tour-best", best_order, best_path))

        dt = perf_counter() - t0
        self._update_stats(dt)
        return TourResult(
            optimal_path=best_path,
            best_order=best_order,
            all_paths=all_paths,
            steps=steps,
            found=found,
            tested=len(tested),
        )

    # ---- helpers ----

    def _pairwise_paths(self, graph: Graph, ids: Sequence[str]) -> PairPaths:
        table: PairPaths = {}
        for a in ids:
            row = table.setdefault(a, {})
            for b in ids:
                if a == b:
                    continue
                result = self.path_algo.plan(graph, a, b)
                if result.found:
                    row[b] = result.path
        return table

    @staticmethod
    def _stitch(all_paths: PairPaths, tour: Sequence[str]) -> Optional[List[str]]:
        """
        Concatenate the segments tour[i] -> tour[i+1], merging the shared
        endpoint. None if any segment is missing; [] for a tour with no legs.
        """
        if len(tour) < 2:
            return []
        path: List[str] = [tour[0]]
        for a, b in zip(tour, tour[1:]):
            segment = all_paths.get(a, {}).get(b)
            if segment is None:
                return None
            path.extend(segment[1:])
        return path


ALGORITHM = ExactBruteForceTour()


def find_optimal_multi_goal_path(graph: Graph, start: str, goals: List[str]) -> TourResult:
    return ALGORITHM.solve(graph, start, goals)
