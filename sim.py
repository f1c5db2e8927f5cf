# sim.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import random

from config import Config
from graph_gen import GraphGeneratorOptions, find_opposite_corner_nodes, generate_random_graph
from graph_model import Graph, make_key
from maze import generate_maze
from pathfinding import PATHFINDING_ALGOS, AlgorithmResult
from tours import TOUR_ALGOS, TourResult


def build_graph(cfg: Config) -> Graph:
    """Generate the graph described by cfg.graph_kind."""
    if cfg.graph_kind == "maze":
        return generate_maze(
            cfg.width,
            cfg.height,
            wall_removal_percent=cfg.wall_removal_percent,
            seed=cfg.seed,
        )
    if cfg.graph_kind == "circular":
        options = GraphGeneratorOptions(
            node_count=cfg.node_count,
            avg_degree=cfg.avg_degree,
            seed=cfg.seed,
        )
        return generate_random_graph(options)
    if cfg.graph_kind == "cloud":
        options = GraphGeneratorOptions(
            node_count=cfg.node_count,
            max_connections_per_node=cfg.max_connections_per_node,
            connection_radius=cfg.connection_radius,
            seed=cfg.seed,
        )
        return generate_random_graph(options)
    raise ValueError(f"Unknown graph kind: {cfg.graph_kind}")


def default_endpoints(graph: Graph) -> tuple[str, str]:
    """Top-left / bottom-right cell for mazes, opposite corner nodes otherwise."""
    if graph.is_grid:
        return make_key(0, 0), make_key(graph.width - 1, graph.height - 1)
    return find_opposite_corner_nodes(graph)


@dataclass
class Simulator:
    cfg: Config
    graph: Optional[Graph] = None
    path_algo_name: str = "AStar"
    tour_algo_name: str = "ExactBruteForce"

    # control terminal logging
    log_events: bool = False

    start: str = ""
    end: str = ""
    goals: List[str] = field(default_factory=list)

    # filled by run()
    result: Optional[AlgorithmResult] = None
    tour_result: Optional[TourResult] = None

    def __post_init__(self) -> None:
        self._log(f"[INIT] Simulator with PF={self.path_algo_name}, "
                  f"TR={self.tour_algo_name}, graph={self.cfg.graph_kind}")

        if self.path_algo_name not in PATHFINDING_ALGOS:
            raise ValueError(f"Unknown pathfinding algorithm: {self.path_algo_name}")
        self.path_algo = PATHFINDING_ALGOS[self.path_algo_name]

        if self.tour_algo_name not in TOUR_ALGOS:
            raise ValueError(f"Unknown tour algorithm: {self.tour_algo_name}")
        self.tour_algo = TOUR_ALGOS[self.tour_algo_name]

        if self.graph is None:
            self.graph = build_graph(self.cfg)
        self._log(f"[GRAPH] {len(self.graph)} nodes, {self.graph.edge_count()} edges")

        # the A* heuristic parses "x,y" ids
        if self.path_algo_name == "AStar" and not self.graph.is_grid:
            raise ValueError("AStar needs a grid graph; use Dijkstra or BidirectionalBFS.")

        default_start, default_end = default_endpoints(self.graph)
        self.start = self.cfg.start or default_start
        self.end = self.cfg.end or default_end
        self.goals = list(self.cfg.goals) or self._pick_goals(self.cfg.n_goals)

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------- setup helpers ---------- #

    def _pick_goals(self, n_goals: int) -> List[str]:
        if n_goals <= 0:
            return []
        rng = random.Random(self.cfg.seed)
        candidates = [nid for nid in self.graph.nodes if nid != self.start]
        if len(candidates) < n_goals:
            raise ValueError(
                f"Not enough nodes ({len(candidates)}) for {n_goals} goals."
            )
        return rng.sample(candidates, n_goals)

    # ---------------- running ---------------- #

    def run(self) -> AlgorithmResult:
        """
        Run the configured pathfinder from start to end and, if goals are
        set, the tour search from start over all goals.
        """
        self._log(f"[RUN] {self.path_algo.name}: {self.start} -> {self.end}")
        self.result = self.path_algo.plan(self.graph, self.start, self.end)
        self._log(
            f"[RESULT] found={self.result.found}, path nodes={len(self.result.path)}, "
            f"trace steps={len(self.result.steps)}"
        )

        if self.goals:
            self._log(f"[RUN] {self.tour_algo.name}: {self.start} -> goals {self.goals}")
            self.tour_result = self.tour_algo.solve(self.graph, self.start, self.goals)
            self._log(
                f"[RESULT] tour found={self.tour_result.found}, "
                f"orders tested={self.tour_result.tested}, "
                f"best order={self.tour_result.best_order}"
            )

        return self.result

    # ---------------- metrics ---------------- #

    def summary(self) -> Dict[str, Any]:
        """Nested metrics dict for summary.json / batch CSV rows."""
        if self.result is None:
            raise RuntimeError("Simulator.summary() called before run().")

        pa = self.path_algo
        steps = self.result.steps
        expanded = sum(1 for s in steps if s.type.startswith("current"))

        summary: Dict[str, Any] = {
            "graph": {
                "kind": self.cfg.graph_kind,
                "nodes": len(self.graph),
                "edges": self.graph.edge_count(),
                "connected": self.graph.is_connected(),
            },
            "endpoints": {"start": self.start, "end": self.end},
            "result": {
                "found": self.result.found,
                "path_nodes": len(self.result.path),
                "path_hops": max(len(self.result.path) - 1, 0),
                "trace_steps": len(steps),
                "expanded": expanded,
            },
            "pathfinding": {
                "algorithm": pa.name,
                "call_count": pa.call_count,
                "total_runtime": pa.total_runtime,
                "avg_runtime": (pa.total_runtime / pa.call_count) if pa.call_count else 0.0,
            },
        }

        if self.tour_result is not None:
            ta = self.tour_algo
            summary["tours"] = {
                "algorithm": ta.name,
                "goals": list(self.goals),
                "found": self.tour_result.found,
                "best_order": self.tour_result.best_order,
                "path_nodes": len(self.tour_result.optimal_path),
                "tested": self.tour_result.tested,
                "call_count": ta.call_count,
                "total_runtime": ta.total_runtime,
                "avg_runtime": (ta.total_runtime / ta.call_count) if ta.call_count else 0.0,
            }

        return summary
