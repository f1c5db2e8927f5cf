# config.py
from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class Config:
    # "maze" (grid), "circular" (degree target) or "cloud" (proximity)
    graph_kind: str = "maze"

    # maze size in cells
    width: int = 15
    height: int = 15
    wall_removal_percent: float = 25.0  # share of leftover walls knocked down

    # general graphs
    node_count: int = 20
    avg_degree: float = 3.0              # circular layout
    max_connections_per_node: int = 4    # cloud layout
    connection_radius: float = 150.0     # cloud layout

    seed: Optional[int] = 0  # None = non-deterministic

    # endpoints; None picks a default (opposite corners)
    start: Optional[str] = None
    end: Optional[str] = None

    # multi-goal tour: explicit goals, or n_goals picked at random
    goals: List[str] = field(default_factory=list)
    n_goals: int = 0

    # "Dijkstra", "AStar" (grid only) or "BidirectionalBFS"
    path_algo_name: str = "AStar"
    tour_algo_name: str = "ExactBruteForce"

    log_events: bool = True
    fps: int = 10  # GIF frame rate
