# graph_model.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

Pos = Tuple[int, int]  # (x, y) with x = col, y = row
Edge = Tuple[str, str]  # canonical (min_id, max_id)


def make_key(x: int, y: int) -> str:
    return f"{x},{y}"


def parse_key(key: str) -> Pos:
    """Inverse of make_key. Raises ValueError for ids that are not 'x,y'."""
    xs, ys = key.split(",")
    return int(xs), int(ys)


@dataclass(frozen=True)
class Node:
    """A graph vertex: id, 2D position and its ordered neighbor ids."""
    id: str
    x: float
    y: float
    neighbors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Graph:
    """
    Undirected graph stored as adjacency lists on each node.

    Two flavours share this type:
      - grid graphs (mazes): ids are "x,y", width/height are set
      - general graphs: opaque ids ("n0", "n1", ...), width/height are None

    Generators build their adjacency in local dicts and freeze it into a
    Graph at the end, so algorithms only ever see an immutable structure.
    """
    nodes: Dict[str, Node] = field(default_factory=dict)
    width: Optional[int] = None
    height: Optional[int] = None

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def from_adjacency(
        cls,
        positions: Dict[str, Tuple[float, float]],
        adjacency: Dict[str, List[str]],
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> "Graph":
        nodes = {
            nid: Node(id=nid, x=x, y=y, neighbors=tuple(adjacency.get(nid, ())))
            for nid, (x, y) in positions.items()
        }
        return cls(nodes=nodes, width=width, height=height)

    # ------------------------------------------------------------------ #
    # Basic queries                                                      #
    # ------------------------------------------------------------------ #
    @property
    def is_grid(self) -> bool:
        return self.width is not None and self.height is not None

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def neighbors(self, node_id: str) -> Tuple[str, ...]:
        node = self.nodes.get(node_id)
        return node.neighbors if node is not None else ()

    def has_edge(self, a: str, b: str) -> bool:
        return b in self.neighbors(a)

    def edges(self) -> Set[Edge]:
        """Every undirected edge once, as a sorted id pair."""
        out: Set[Edge] = set()
        for node in self.nodes.values():
            for nb in node.neighbors:
                out.add((node.id, nb) if node.id < nb else (nb, node.id))
        return out

    def edge_count(self) -> int:
        return len(self.edges())

    def degree(self, node_id: str) -> int:
        return len(self.neighbors(node_id))

    # ------------------------------------------------------------------ #
    # Connectivity                                                       #
    # ------------------------------------------------------------------ #
    def reachable_from(self, node_id: str) -> FrozenSet[str]:
        """Ids reachable from node_id (including itself) via plain BFS."""
        if node_id not in self.nodes:
            return frozenset()
        seen: Set[str] = {node_id}
        q = deque([node_id])
        while q:
            cur = q.popleft()
            for nb in self.neighbors(cur):
                if nb in seen or nb not in self.nodes:
                    continue
                seen.add(nb)
                q.append(nb)
        return frozenset(seen)

    def is_connected(self) -> bool:
        if not self.nodes:
            return True
        first = next(iter(self.nodes))
        return len(self.reachable_from(first)) == len(self.nodes)

    def validate(self) -> None:
        """Raise ValueError if a neighbor id is unknown or an edge is one-sided."""
        for node in self.nodes.values():
            for nb in node.neighbors:
                if nb not in self.nodes:
                    raise ValueError(f"Node {node.id!r} lists unknown neighbor {nb!r}")
                if node.id not in self.nodes[nb].neighbors:
                    raise ValueError(f"Edge {node.id!r} -> {nb!r} is not symmetric")
