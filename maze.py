# maze.py
from __future__ import annotations

from dataclasses import dataclass
from math import floor
from typing import Dict, List, Optional, Tuple

from graph_model import Graph, make_key
from rng import RandomSource, make_random, pick

# (x, y, side) with side in {"top", "left"}: the canonical owner of a wall
Wall = Tuple[int, int, str]


@dataclass
class Cell:
    """One maze cell while carving. Never leaves this module."""
    x: int
    y: int
    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True
    visited: bool = False


def generate_maze(
    width: int,
    height: int,
    wall_removal_percent: float = 0.0,
    seed: Optional[int] = None,
    rand: Optional[RandomSource] = None,
) -> Graph:
    """
    Build a width x height grid maze.

    1) Recursive backtracking (iterative, with an explicit stack) carves a
       perfect maze: exactly one simple path between any two cells.
    2) If wall_removal_percent > 0, that share of the remaining interior
       walls is knocked down at random, which introduces cycles.

    Node ids are "x,y". An edge exists iff no wall separates the two cells.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Maze size must be positive, got {width}x{height}.")
    if not 0 <= wall_removal_percent <= 100:
        raise ValueError(
            f"wall_removal_percent must be within [0, 100], got {wall_removal_percent}."
        )

    if rand is None:
        rand = make_random(seed)

    cells = [[Cell(x, y) for x in range(width)] for y in range(height)]

    _carve(cells, width, height, rand)

    if wall_removal_percent > 0:
        _remove_random_walls(cells, width, height, wall_removal_percent, rand)

    return _cells_to_graph(cells, width, height)


# ---------------------------------------------------------------------- #
# Carving                                                                #
# ---------------------------------------------------------------------- #
def _carve(cells: List[List[Cell]], width: int, height: int, rand: RandomSource) -> None:
    start = cells[0][0]
    start.visited = True
    stack: List[Cell] = [start]

    while stack:
        current = stack[-1]
        candidates = _unvisited_neighbors(current, cells, width, height)
        if candidates:
            nxt = pick(rand, candidates)
            _remove_wall(current, nxt)
            nxt.visited = True
            stack.append(nxt)
        else:
            stack.pop()


def _unvisited_neighbors(
    cell: Cell, cells: List[List[Cell]], width: int, height: int
) -> List[Cell]:
    x, y = cell.x, cell.y
    out: List[Cell] = []
    # up, right, down, left
    if y > 0 and not cells[y - 1][x].visited:
        out.append(cells[y - 1][x])
    if x < width - 1 and not cells[y][x + 1].visited:
        out.append(cells[y][x + 1])
    if y < height - 1 and not cells[y + 1][x].visited:
        out.append(cells[y + 1][x])
    if x > 0 and not cells[y][x - 1].visited:
        out.append(cells[y][x - 1])
    return out


def _remove_wall(a: Cell, b: Cell) -> None:
    dx = b.x - a.x
    dy = b.y - a.y
    if dx == 1:
        a.right = False
        b.left = False
    elif dx == -1:
        a.left = False
        b.right = False
    elif dy == 1:
        a.bottom = False
        b.top = False
    elif dy == -1:
        a.top = False
        b.bottom = False


# ---------------------------------------------------------------------- #
# Extra wall removal                                                     #
# ---------------------------------------------------------------------- #
def _standing_walls(cells: List[List[Cell]], width: int, height: int) -> List[Wall]:
    """Interior walls still up, each listed once via its top/left owner."""
    walls: List[Wall] = []
    for y in range(height):
        for x in range(width):
            cell = cells[y][x]
            if y > 0 and cell.top:
                walls.append((x, y, "top"))
            if x > 0 and cell.left:
                walls.append((x, y, "left"))
    return walls


def _remove_random_walls(
    cells: List[List[Cell]],
    width: int,
    height: int,
    percent: float,
    rand: RandomSource,
) -> None:
    walls = _standing_walls(cells, width, height)
    n_remove = floor(len(walls) * percent / 100)

    for _ in range(n_remove):
        if not walls:
            break
        idx = int(rand() * len(walls))
        x, y, side = walls.pop(idx)
        if side == "top":
            _remove_wall(cells[y][x], cells[y - 1][x])
        else:
            _remove_wall(cells[y][x], cells[y][x - 1])


# ---------------------------------------------------------------------- #
# Conversion                                                             #
# ---------------------------------------------------------------------- #
def _cells_to_graph(cells: List[List[Cell]], width: int, height: int) -> Graph:
    positions: Dict[str, Tuple[float, float]] = {}
    adjacency: Dict[str, List[str]] = {}

    for y in range(height):
        for x in range(width):
            cell = cells[y][x]
            nid = make_key(x, y)
            nbrs: List[str] = []
            if not cell.top and y > 0:
                nbrs.append(make_key(x, y - 1))
            if not cell.right and x < width - 1:
                nbrs.append(make_key(x + 1, y))
            if not cell.bottom and y < height - 1:
                nbrs.append(make_key(x, y + 1))
            if not cell.left and x > 0:
                nbrs.append(make_key(x - 1, y))
            positions[nid] = (x, y)
            adjacency[nid] = nbrs

    return Graph.from_adjacency(positions, adjacency, width=width, height=height)
