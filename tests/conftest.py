"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from typing import Dict, List

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from graph_model import Graph  # noqa: E402
from maze import generate_maze  # noqa: E402


def graph_from_edges(nodes: List[str], edges: List[tuple]) -> Graph:
    """Small general graph with nodes laid out on a line."""
    adjacency: Dict[str, List[str]] = {n: [] for n in nodes}
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    positions = {n: (float(i), 0.0) for i, n in enumerate(nodes)}
    return Graph.from_adjacency(positions, adjacency)


def grid_from_edges(width: int, height: int, edges: List[tuple]) -> Graph:
    """Grid graph with "x,y" ids and exactly the given open passages."""
    adjacency: Dict[str, List[str]] = {f"{x},{y}": [] for y in range(height) for x in range(width)}
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    positions = {nid: tuple(map(float, nid.split(","))) for nid in adjacency}
    return Graph.from_adjacency(positions, adjacency, width=width, height=height)


@pytest.fixture
def perfect_maze() -> Graph:
    """Seeded 5x5 perfect maze."""
    return generate_maze(5, 5, wall_removal_percent=0, seed=42)


@pytest.fixture
def open_grid() -> Graph:
    """4x4 grid with every passage open."""
    edges = []
    for y in range(4):
        for x in range(4):
            if x < 3:
                edges.append((f"{x},{y}", f"{x + 1},{y}"))
            if y < 3:
                edges.append((f"{x},{y}", f"{x},{y + 1}"))
    return grid_from_edges(4, 4, edges)


@pytest.fixture
def k4() -> Graph:
    """Complete graph on A, B, C, D."""
    nodes = ["A", "B", "C", "D"]
    edges = [(a, b) for i, a in enumerate(nodes) for b in nodes[i + 1:]]
    return graph_from_edges(nodes, edges)


@pytest.fixture
def two_components() -> Graph:
    """A-B-C and D-E, no edge between them."""
    return graph_from_edges(["A", "B", "C", "D", "E"], [("A", "B"), ("B", "C"), ("D", "E")])
