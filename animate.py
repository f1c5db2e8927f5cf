# animate.py
from __future__ import annotations

from math import ceil
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.collections import LineCollection

from graph_model import Graph, parse_key
from viz import (
    BG_COLOR,
    CURRENT_COLOR,
    EDGE_COLOR,
    NODE_COLOR,
    VISITED_COLOR,
    VISITING_COLOR,
    legend_patches,
    node_xy,
    wall_segments,
)

STATE_COLORS: Dict[str, Any] = {
    "current": CURRENT_COLOR,
    "frontier": VISITING_COLOR,
    "visited": VISITED_COLOR,
    "path": np.array([0.17, 0.63, 0.17]),
}


def _state_of(step_type: str) -> str:
    """Map a trace event type onto one of the four drawn states."""
    if step_type.startswith("current") or step_type == "intersection":
        return "current"
    if step_type.startswith("visited"):
        return "visited"
    if step_type in ("path", "tour-best"):
        return "path"
    # visiting, goal-*, start-*, tour-test
    return "frontier"


def _changes(step: Any) -> Tuple[bool, List[Tuple[str, str]]]:
    """
    (reset, [(node_id, state), ...]) for one trace event.
    Tour events carry a whole path and replace what was drawn before.
    """
    state = _state_of(step.type)
    node_id = getattr(step, "node_id", None)
    if node_id is not None:
        return False, [(node_id, state)]
    return True, [(nid, state) for nid in getattr(step, "path", [])]


def compute_frames(
    node_ids: Sequence[str],
    steps: Sequence[Any],
    max_frames: int = 200,
) -> List[Dict[str, str]]:
    """
    Replay a trace into per-frame node states.

    Frame 0 is the empty state; every later frame applies the next
    chunk of events in trace order, so the last frame shows the final
    state. Long traces are chunked to at most max_frames frames.
    """
    known = set(node_ids)
    per_frame = max(1, ceil(len(steps) / max(1, max_frames - 1)))

    frames: List[Dict[str, str]] = [{}]
    state: Dict[str, str] = {}
    for i, step in enumerate(steps):
        reset, changes = _changes(step)
        if reset:
            state = {}
        for nid, s in changes:
            if nid in known:
                state[nid] = s
        if (i + 1) % per_frame == 0 or i == len(steps) - 1:
            frames.append(dict(state))
    return frames


def animate_trace(
    graph: Graph,
    steps: Sequence[Any],
    out_path: str | Path,
    fps: int = 10,
    max_frames: int = 200,
    title: str = "Algorithm trace",
) -> None:
    """
    Build a GIF replaying a step trace over the graph: frontier, current,
    visited and final-path nodes change color in trace order.

    - graph: the graph the algorithm ran on
    - steps: result.steps (PathStep, BFSStep or TourStep events)
    - out_path: path to save the GIF
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if not steps:
        print("No trace to animate; skipping GIF.")
        return

    node_ids = list(graph.nodes)
    frames = compute_frames(node_ids, steps, max_frames=max_frames)

    if graph.is_grid:
        fig, ax = plt.subplots(figsize=(max(4.0, graph.width / 2.0), max(4.0, graph.height / 2.0)))
        base_img = np.zeros((graph.height, graph.width, 3), dtype=float)
        base_img[:, :, :] = BG_COLOR
        im = ax.imshow(base_img, extent=(0, graph.width, graph.height, 0), interpolation="nearest")
        ax.add_collection(LineCollection(wall_segments(graph), colors="0.3", linewidths=1.5))
        ax.set_xlim(-0.2, graph.width + 0.2)
        ax.set_ylim(graph.height + 0.2, -0.2)
        cells = {nid: parse_key(nid) for nid in node_ids}

        def render(state: Dict[str, str]):
            img = base_img.copy()
            for nid, s in state.items():
                x, y = cells[nid]
                img[y, x] = STATE_COLORS[s]
            im.set_array(img)
            return (im,)
    else:
        fig, ax = plt.subplots(figsize=(7.0, 7.0))
        edges = [
            [(graph.nodes[a].x, graph.nodes[a].y), (graph.nodes[b].x, graph.nodes[b].y)]
            for a, b in sorted(graph.edges())
        ]
        if edges:
            ax.add_collection(LineCollection(edges, colors=[EDGE_COLOR], linewidths=0.8, zorder=1))
        xy = node_xy(graph, node_ids)
        scatter = ax.scatter(xy[:, 0], xy[:, 1], s=60, c=[NODE_COLOR] * len(node_ids),
                             edgecolors="white", zorder=2)
        ax.autoscale_view()
        ax.invert_yaxis()

        def render(state: Dict[str, str]):
            colors = [STATE_COLORS[state[nid]] if nid in state else NODE_COLOR for nid in node_ids]
            scatter.set_facecolors(colors)
            return (scatter,)

    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    fig.patch.set_facecolor(BG_COLOR)
    fig.suptitle(title, fontsize=16, y=0.98)
    patches = legend_patches()
    fig.legend(
        handles=patches,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.94),
        ncol=len(patches),
        fontsize=9,
        frameon=False,
    )
    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.92])

    def update(frame: int):
        return render(frames[frame])

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=len(frames),
        interval=1000 / fps,
        blit=False,
    )

    writer = animation.PillowWriter(fps=fps)
    ani.save(out_path, writer=writer)
    plt.close(fig)
    print(f"Saved animation GIF to {out_path}")
