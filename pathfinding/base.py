# pathfinding/base.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional, Protocol, Sequence, Union

from graph_model import Graph

PathStepType = Literal["current", "visiting", "visited", "path"]

BFSStepType = Literal[
    "start-forward",
    "start-backward",
    "goal-forward",
    "goal-backward",
    "current-forward",
    "current-backward",
    "visited-forward",
    "visited-backward",
    "intersection",
    "path",
]

Side = Literal["forward", "backward"]


def _compact(obj: Any) -> Dict[str, Any]:
    return {k: v for k, v in asdict(obj).items() if v is not None}


@dataclass(frozen=True)
class PathStep:
    """One trace event of Dijkstra / A*."""
    node_id: str
    type: PathStepType
    distance: Optional[float] = None
    heuristic: Optional[float] = None
    f_score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass(frozen=True)
class BFSStep:
    """One trace event of the bidirectional BFS, tagged with side and level."""
    node_id: str
    type: BFSStepType
    side: Optional[Side] = None
    level: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


Step = Union[PathStep, BFSStep]


@dataclass
class AlgorithmResult:
    """
    path  : node ids from start to goal (inclusive), [] if unreachable
    steps : ordered, append-only trace of the run
    found : True iff path is non-empty and ends at the goal
    """
    path: List[str]
    steps: Sequence[Step] = field(default_factory=list)
    found: bool = False


@dataclass
class BFSResult(AlgorithmResult):
    intersection_node: Optional[str] = None


class PathfindingAlgorithm(Protocol):
    name: str
    # Optional timing stats (per algorithm implementation)
    total_runtime: float
    call_count: int
    last_runtime: float

    def plan(self, graph: Graph, start: str, goal: str) -> AlgorithmResult:
        ...

    def reset_stats(self) -> None:
        ...


def reconstruct_path(previous: Dict[str, Optional[str]], start: str, goal: str) -> List[str]:
    """
    Walk predecessors back from goal. Returns [] when the walk does not
    end at start (goal never reached).
    """
    path: List[str] = []
    cur: Optional[str] = goal
    while cur is not None:
        path.append(cur)
        if cur == start:
            break
        cur = previous.get(cur)
    path.reverse()

    if not path or path[0] != start:
        return []
    return path
