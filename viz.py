# viz.py
from __future__ import annotations
from typing import List, Optional, Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.patches import Patch

from graph_model import Graph, make_key

# --- Color palette (RGB in 0–1), shared with animate.py ---
BG_COLOR = np.array([0.96, 0.96, 0.96])        # light gray background
WALL_COLOR = np.array([0.30, 0.30, 0.30])      # dark gray
EDGE_COLOR = np.array([0.75, 0.75, 0.75])      # light gray
NODE_COLOR = np.array([0.55, 0.55, 0.55])
VISITING_COLOR = np.array([1.00, 0.78, 0.37])  # soft amber
VISITED_COLOR = np.array([0.62, 0.79, 0.88])   # pale blue
CURRENT_COLOR = np.array([0.84, 0.37, 0.30])   # muted red
PATH_COLOR = "#2ca02c"                         # green
START_COLOR = "#9467bd"                        # purple
END_COLOR = "#1f77b4"                          # blue


def wall_segments(graph: Graph) -> np.ndarray:
    """
    Line segments for every wall of a grid maze, in cell units.

    Cell (x, y) spans [x, x+1] x [y, y+1]; a wall is drawn between two
    adjacent cells iff they are not neighbors, plus the outer border.
    """
    w, h = graph.width, graph.height
    segs: List[Sequence[Sequence[float]]] = [
        [(0, 0), (w, 0)],
        [(0, h), (w, h)],
        [(0, 0), (0, h)],
        [(w, 0), (w, h)],
    ]
    for y in range(h):
        for x in range(w):
            nid = make_key(x, y)
            if x < w - 1 and not graph.has_edge(nid, make_key(x + 1, y)):
                segs.append([(x + 1, y), (x + 1, y + 1)])
            if y < h - 1 and not graph.has_edge(nid, make_key(x, y + 1)):
                segs.append([(x, y + 1), (x + 1, y + 1)])
    return np.array(segs, dtype=float)


def node_xy(graph: Graph, ids: Sequence[str]) -> np.ndarray:
    """Plot coordinates for node ids (cell centers for grid graphs)."""
    offset = 0.5 if graph.is_grid else 0.0
    if not ids:
        return np.empty((0, 2))
    return np.array(
        [(graph.nodes[i].x + offset, graph.nodes[i].y + offset) for i in ids],
        dtype=float,
    )


def draw_base(ax: Axes, graph: Graph) -> None:
    """Maze walls for grid graphs, edges + nodes for general graphs."""
    if graph.is_grid:
        ax.add_collection(LineCollection(wall_segments(graph), colors=[WALL_COLOR], linewidths=1.5))
        ax.set_xlim(-0.2, graph.width + 0.2)
        ax.set_ylim(graph.height + 0.2, -0.2)  # row 0 on top
    else:
        edges = [
            [(graph.nodes[a].x, graph.nodes[a].y), (graph.nodes[b].x, graph.nodes[b].y)]
            for a, b in sorted(graph.edges())
        ]
        if edges:
            ax.add_collection(LineCollection(edges, colors=[EDGE_COLOR], linewidths=0.8, zorder=1))
        xy = node_xy(graph, list(graph.nodes))
        ax.scatter(xy[:, 0], xy[:, 1], s=40, c=[NODE_COLOR], edgecolors="white", zorder=2)
        ax.autoscale_view()
        ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])


def draw_graph(
    graph: Graph,
    out_path: str | Path,
    path: Optional[Sequence[str]] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    title: str = "Graph",
) -> None:
    """
    Draw a snapshot of a graph, optionally with a solved path:
      - maze walls (grid) or edges/nodes (general graph)
      - path: green polyline through node centers
      - start: purple star, end: blue circle
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if graph.is_grid:
        figsize = (max(4.0, graph.width / 2.0), max(4.0, graph.height / 2.0))
    else:
        figsize = (7.0, 7.0)
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(BG_COLOR)

    draw_base(ax, graph)

    handles = []
    if path:
        xy = node_xy(graph, list(path))
        (line,) = ax.plot(xy[:, 0], xy[:, 1], color=PATH_COLOR, linewidth=2.5, zorder=3, label="path")
        handles.append(line)
    if start is not None and start in graph:
        sx, sy = node_xy(graph, [start])[0]
        handles.append(ax.scatter([sx], [sy], marker="*", s=180, c=START_COLOR, zorder=4, label="start"))
    if end is not None and end in graph:
        ex, ey = node_xy(graph, [end])[0]
        handles.append(ax.scatter([ex], [ey], marker="o", s=90, c=END_COLOR, zorder=4, label="end"))

    fig.suptitle(title, fontsize=16, y=0.98)
    if handles:
        fig.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, 0.94),
            ncol=len(handles),
            fontsize=9,
            frameon=False,
        )

    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.92])
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def legend_patches() -> list:
    return [
        Patch(facecolor=CURRENT_COLOR, edgecolor="black", label="current"),
        Patch(facecolor=VISITING_COLOR, edgecolor="black", label="frontier"),
        Patch(facecolor=VISITED_COLOR, edgecolor="black", label="visited"),
        Patch(facecolor=PATH_COLOR, edgecolor="black", label="path"),
    ]
