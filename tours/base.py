# tours/base.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Protocol

from graph_model import Graph

TourStepType = Literal["tour-test", "tour-best"]

# all_paths[a][b] = shortest path a -> b; unreachable pairs are absent
PairPaths = Dict[str, Dict[str, List[str]]]


@dataclass(frozen=True)
class TourStep:
    """
    One trace event of the tour search.

      tour-test - a valid goal ordering that was evaluated
      tour-best - the winning ordering, emitted once at the end
    """
    type: TourStepType
    order: List[str]
    path: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TourResult:
    optimal_path: List[str]
    best_order: List[str] = field(default_factory=list)
    all_paths: PairPaths = field(default_factory=dict)
    steps: List[TourStep] = field(default_factory=list)
    found: bool = False
    tested: int = 0


class TourAlgorithm(Protocol):
    """
    Interface for tour / TSP solvers.

    Given:
      - graph
      - start node id
      - list of goal node ids

    Return:
      - a TourResult with the full node path visiting every goal,
        the goal order, and the trace of tested orderings
    """

    name: str

    # timing stats (seconds)
    total_runtime: float
    call_count: int
    last_runtime: float

    def solve(
        self,
        graph: Graph,
        start: str,
        goals: List[str],
    ) -> TourResult:
        ...

    def reset_stats(self) -> None:
        ...
