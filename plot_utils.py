#!/usr/bin/env python3
"""
plot_utils.py

Boxplots of batch_run.py results using seaborn.

Typical workflow:

1) Run batch experiments:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import plot_boxplots_from_csv

        plot_boxplots_from_csv(
            csv_path="outputs_batch/batch_results.csv",
            group_by=["pathfinding.algorithm"],
            metrics=["result.expanded", "result.trace_steps"],
            output_dir="outputs_batch/plots",
            show=False,
        )

   - Or from the command line (using the DEFAULT_* constants at the bottom):
        python plot_utils.py
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

import seaborn as sns


PathLike = Union[str, Path]


def load_results(csv_path: PathLike, group_by: Sequence[str], metrics: Sequence[str]) -> pd.DataFrame:
    """
    Read the batch CSV and check that every requested column exists.
    Multiple group-by columns are joined into one "__group_label__" column.
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)

    for col in list(group_by) + list(metrics):
        if col not in df.columns:
            raise ValueError(
                f"column '{col}' not found in CSV. "
                f"Available columns include: {list(df.columns)[:20]} ..."
            )

    if len(group_by) > 1:
        df["__group_label__"] = df[list(group_by)].astype(str).agg(" | ".join, axis=1)
    return df


def plot_boxplots_from_csv(
    csv_path: PathLike,
    group_by: Sequence[str],
    metrics: Sequence[str],
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    x_axis_label: Optional[str] = None,
    y_axis_labels: Optional[Dict[str, str]] = None,
    palette_name: str = "colorblind",
    log_scale: bool = False,
) -> List[Path]:
    """
    One seaborn boxplot per metric, grouped by the given column(s).

    Parameters
    ----------
    csv_path : str or Path
        Path to the CSV file (e.g. 'outputs_batch/batch_results.csv').
    group_by : list[str]
        Column(s) to group by, e.g. ['pathfinding.algorithm'].
    metrics : list[str]
        Numeric columns to plot, e.g. ['result.expanded'].
    output_dir : str or Path or None
        If provided, each plot is saved there as a PDF.
    show : bool
        If True, show plots interactively; otherwise close them.
    log_scale : bool
        Log y-axis (useful for runtimes).

    Returns
    -------
    list[Path]
        Files written (empty when output_dir is None).
    """
    group_by = list(group_by)
    df = load_results(csv_path, group_by, metrics)
    group_col = group_by[0] if len(group_by) == 1 else "__group_label__"

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    categories = sorted(df[group_col].astype(str).unique())
    palette = dict(zip(categories, sns.color_palette(palette_name, n_colors=len(categories))))
    x_label = x_axis_label if x_axis_label is not None else " | ".join(group_by)

    sns.set_style("whitegrid")
    written: List[Path] = []

    for metric in metrics:
        sub = df[[group_col, metric]].dropna()
        sub = sub.assign(**{group_col: sub[group_col].astype(str)})
        if sub.empty:
            print(f"[WARN] No data for metric '{metric}' after dropping NaNs. Skipping.")
            continue

        stats = sub.groupby(group_col)[metric].agg(n="count", median="median").reindex(categories)
        print(f"\n[STATS] {metric}")
        print(stats.to_string(float_format=lambda x: f"{x:.4g}"))

        fig, ax = plt.subplots(figsize=(max(6.0, 1.5 * len(categories)), 6))
        sns.boxplot(
            data=sub,
            x=group_col,
            y=metric,
            hue=group_col,
            order=categories,
            palette=palette,
            dodge=False,
            ax=ax,
        )
        ax.set_title(f"{metric} by {', '.join(group_by)}", fontsize=16, pad=28)
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_axis_labels.get(metric, metric) if y_axis_labels else metric)
        if log_scale:
            ax.set_yscale("log")

        handles = [mpatches.Patch(color=palette[c], label=c) for c in categories]
        ax.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, 1.08),
            ncol=min(len(handles), 10),
            frameon=False,
        )
        fig.tight_layout()

        if output_dir is not None:
            safe_metric = metric.replace(".", "_").replace(" ", "_")
            fname = output_dir / f"box_{safe_metric}_by_{'_'.join(group_by).replace('.', '_')}.pdf"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            written.append(fname)
            print(f"Saved boxplot for '{metric}' to {fname}")

        if show:
            plt.show()
        else:
            plt.close(fig)

    return written


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_GROUP_BY = ["pathfinding.algorithm"]
DEFAULT_METRICS = [
    "result.expanded",
    "result.trace_steps",
    "pathfinding.avg_runtime",
]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"


if __name__ == "__main__":
    plot_boxplots_from_csv(
        csv_path=DEFAULT_CSV,
        group_by=DEFAULT_GROUP_BY,
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=False,
        x_axis_label="Pathfinding algorithm",
        y_axis_labels={
            "result.expanded": "Nodes expanded",
            "result.trace_steps": "Trace length",
            "pathfinding.avg_runtime": "Average runtime (s)",
        },
    )
