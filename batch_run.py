#!/usr/bin/env python3
"""
Batch experiment runner.

Sweeps the Cartesian product of PARAM_GRID (batch_config.py), runs one
Simulator per combination (pathfinder, plus the tour search when
n_goals > 0) and writes one CSV row per successful run:

    purpose, <grid parameters>, graph.*, endpoints.*, result.*,
    pathfinding.*, tours.*

Columns are the dotted keys of Simulator.summary(), flattened with
pandas. Each invocation overwrites outputs_batch/batch_results.csv.

Usage (from the repo root):

    python batch_run.py

Then plot the CSV with plot_utils.py.
"""

import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from batch_config import CPU_COUNT, PARAM_GRID
from config import Config
from sim import Simulator


def run_experiment(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    One run with the given grid parameters. Returns the grid parameters
    merged with the nested summary, or None if the combination is invalid
    (e.g. AStar on a non-grid graph).
    """
    cfg_fields = {k: v for k, v in params.items() if k != "purpose"}
    try:
        cfg = Config(**cfg_fields, log_events=False)
        sim = Simulator(cfg=cfg, path_algo_name=cfg.path_algo_name, tour_algo_name=cfg.tour_algo_name)
    except ValueError as e:
        print(f"[ERROR] skipping {params}: {e}")
        return None

    # stats live on module-level singletons, shared between runs in a worker
    sim.path_algo.reset_stats()
    sim.tour_algo.reset_stats()
    sim.run()
    return {**params, **sim.summary()}


def main_batch(
    out_dir: str | Path = "outputs_batch",
    grid: Optional[Dict[str, List[Any]]] = None,
    processes: Optional[int] = None,
) -> Optional[Path]:
    grid = PARAM_GRID if grid is None else grid
    keys = list(grid)
    combos = [dict(zip(keys, values)) for values in itertools.product(*grid.values())]
    if not combos:
        print("No parameter combinations to run. Check PARAM_GRID.")
        return None

    num_procs = processes or CPU_COUNT or mp.cpu_count()
    print(f"Total experiments to run: {len(combos)} on {num_procs} process(es)")

    if num_procs == 1:
        results = [run_experiment(p) for p in combos]
    else:
        with mp.Pool(processes=num_procs) as pool:
            results = pool.map(run_experiment, combos)

    rows = [r for r in results if r is not None]
    if not rows:
        print("Every experiment failed; nothing written.")
        return None

    df = pd.json_normalize(rows, sep=".")
    columns = sorted(c for c in df.columns if c != "purpose")
    if "purpose" in df.columns:
        columns = ["purpose"] + columns
    df = df[columns]

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "batch_results.csv"
    df.to_csv(out_path, index=False)
    print(f"[RESULT] {len(rows)}/{len(combos)} runs written to {out_path}")
    return out_path


if __name__ == "__main__":
    main_batch()
