# graph_gen.py
from __future__ import annotations

from dataclasses import dataclass
from math import cos, floor, hypot, inf, pi, sin
from typing import Dict, List, Optional, Tuple

from graph_model import Graph
from rng import RandomSource, make_random, pick


@dataclass
class GraphGeneratorOptions:
    """
    Options for generate_random_graph().

    The generation policy follows from which fields are supplied:
      - max_connections_per_node set -> proximity "cloud" layout
      - otherwise avg_degree set     -> circular layout with a degree target
    """
    node_count: int
    avg_degree: Optional[float] = None
    max_connections_per_node: Optional[int] = None
    connection_radius: Optional[float] = None
    seed: Optional[int] = None

    # layout geometry
    canvas_width: float = 600.0
    canvas_height: float = 600.0
    padding: float = 50.0
    radius: float = 200.0  # circle radius for the circular layout

    @property
    def policy(self) -> str:
        if self.max_connections_per_node is not None:
            return "cloud"
        if self.avg_degree is not None:
            return "circular"
        raise ValueError(
            "GraphGeneratorOptions needs either avg_degree (circular layout) "
            "or max_connections_per_node (cloud layout)."
        )


def generate_random_graph(
    options: GraphGeneratorOptions,
    rand: Optional[RandomSource] = None,
) -> Graph:
    """
    Build a random general graph with ids n0..n{k-1}.

    A given seed (or an injected random source) makes the output fully
    reproducible; without one, a fresh OS-seeded source is used.
    """
    if options.node_count < 1:
        raise ValueError(f"node_count must be >= 1, got {options.node_count}.")

    policy = options.policy
    if rand is None:
        rand = make_random(options.seed)

    if policy == "cloud":
        return _generate_cloud(options, rand)
    return _generate_circular(options, rand)


# ---------------------------------------------------------------------- #
# Circular layout, average-degree target                                 #
# ---------------------------------------------------------------------- #
def _generate_circular(options: GraphGeneratorOptions, rand: RandomSource) -> Graph:
    n = options.node_count
    cx = options.canvas_width / 2
    cy = options.canvas_height / 2

    ids = [f"n{i}" for i in range(n)]
    positions: Dict[str, Tuple[float, float]] = {}
    for i, nid in enumerate(ids):
        angle = (i / n) * 2 * pi
        positions[nid] = (cx + options.radius * cos(angle), cy + options.radius * sin(angle))

    adjacency: Dict[str, List[str]] = {nid: [] for nid in ids}

    # random spanning tree first, so the graph is connected before any
    # degree shaping happens
    connected: List[str] = [ids[0]]
    unconnected: List[str] = ids[1:]
    while unconnected:
        a = pick(rand, connected)
        b = pick(rand, unconnected)
        adjacency[a].append(b)
        adjacency[b].append(a)
        connected.append(b)
        unconnected.remove(b)

    # extra edges towards the target average degree; collisions are skipped,
    # so the realized degree can fall short
    target_edges = floor(n * options.avg_degree / 2)
    edges_to_add = max(0, target_edges - (n - 1))
    for _ in range(edges_to_add):
        a = pick(rand, ids)
        b = pick(rand, ids)
        if a == b or b in adjacency[a]:
            continue
        adjacency[a].append(b)
        adjacency[b].append(a)

    return Graph.from_adjacency(positions, adjacency)


# ---------------------------------------------------------------------- #
# Rectangular cloud, proximity connections with a degree cap             #
# ---------------------------------------------------------------------- #
def _generate_cloud(options: GraphGeneratorOptions, rand: RandomSource) -> Graph:
    n = options.node_count
    cap = options.max_connections_per_node
    radius = options.connection_radius if options.connection_radius is not None else inf
    pad = options.padding
    span_x = options.canvas_width - 2 * pad
    span_y = options.canvas_height - 2 * pad

    ids = [f"n{i}" for i in range(n)]
    positions: Dict[str, Tuple[float, float]] = {}
    for nid in ids:
        x = pad + rand() * span_x
        y = pad + rand() * span_y
        positions[nid] = (x, y)

    adjacency: Dict[str, List[str]] = {nid: [] for nid in ids}

    def dist(a: str, b: str) -> float:
        (ax, ay), (bx, by) = positions[a], positions[b]
        return hypot(ax - bx, ay - by)

    def connect(a: str, b: str) -> None:
        adjacency[a].append(b)
        adjacency[b].append(a)

    for a in ids:
        if len(adjacency[a]) >= cap:
            continue
        candidates = [
            (dist(a, b), b)
            for b in ids
            if b != a
            and b not in adjacency[a]
            and len(adjacency[b]) < cap
            and dist(a, b) <= radius
        ]
        candidates.sort(key=lambda item: item[0])
        for _, b in candidates:
            if len(adjacency[a]) >= cap:
                break
            if len(adjacency[b]) < cap:
                connect(a, b)

    # repair: nobody stays isolated
    for a in ids:
        if adjacency[a] or n < 2:
            continue
        others = [b for b in ids if b != a]
        under_cap = [b for b in others if len(adjacency[b]) < cap]
        pool = under_cap if under_cap else others
        nearest = min(pool, key=lambda b: dist(a, b))
        connect(a, nearest)

    return Graph.from_adjacency(positions, adjacency)


# ---------------------------------------------------------------------- #
# Queries                                                                #
# ---------------------------------------------------------------------- #
def find_opposite_corner_nodes(graph: Graph) -> Tuple[str, str]:
    """
    Node ids minimizing and maximizing x + y.

    Handy default start/goal pair for a generated cloud graph.
    """
    if not graph.nodes:
        raise ValueError("Cannot pick corner nodes of an empty graph.")

    min_id = max_id = ""
    min_sum, max_sum = inf, -inf
    for node in graph.nodes.values():
        s = node.x + node.y
        if s < min_sum:
            min_sum, min_id = s, node.id
        if s > max_sum:
            max_sum, max_id = s, node.id
    return min_id, max_id
