# batch_config.py
from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use exactly this many worker processes.
#
# Example:
#   CPU_COUNT = 32       # use 32 processes
#   CPU_COUNT = None     # auto-detect from the machine
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID will run all permutations (Cartesian product) of the values.
#
# Example:
#   "width": [10, 20]
#   "height": [10, 20]
# will generate 4 maze shapes:
#   (10x10), (10x20), (20x10), (20x20)
#
# Be careful: experiment count grows exponentially in the number of values
# per key, i.e.  prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["pathfinding_comparison"],  # free-text label for this batch

    # --- graph parameters ---
    "graph_kind": ["maze"],                 # "maze", "circular" or "cloud"
    "width": [15, 25],                      # maze width in cells
    "height": [15, 25],                     # maze height in cells
    "wall_removal_percent": [0.0, 25.0],    # share of leftover walls knocked down
    "node_count": [20],                     # general graphs only
    "n_goals": [3],                         # goals for the tour search (0 = skip)

    # --- algorithms ---
    # "path_algo_name": ["Dijkstra", "AStar", "BidirectionalBFS"],
    "path_algo_name": ["Dijkstra", "AStar", "BidirectionalBFS"],

    # "tour_algo_name": ["ExactBruteForce"],
    "tour_algo_name": ["ExactBruteForce"],

    # --- randomness ---
    "seed": [i for i in range(10)],  # seeds for the LCG graph generator
}


# -----------------------------------------------------------------------
# Algorithm details, no modification is needed below
# -----------------------------------------------------------------------

    # Pathfinding algorithm:
    #
    #   "Dijkstra"         - Uniform-cost search; works on mazes and general graphs.
    #   "AStar"            - A* with Manhattan heuristic on "x,y" ids (mazes only).
    #   "BidirectionalBFS" - Level-synchronous BFS from both ends; any graph.

    # Tour algorithm:
    #
    #   "ExactBruteForce"  - Tries every goal permutation over pairwise
    #                        bidirectional-BFS paths (small goal sets only).
