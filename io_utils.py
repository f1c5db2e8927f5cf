# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
from typing import Any, Iterable
from config import Config
import uuid


def make_run_dir(
    cfg: Config,
    base: str = "outputs",
    path_algo_name: str | None = None,
) -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (graph kind, size, seed, etc.).
    base : str, optional
        Base directory under which the run folder will be created, by default "outputs".
    path_algo_name : str | None, optional
        Name of the pathfinding algorithm; appended to the folder name when given.

    Folder naming
    -------------
    The folder name encodes:
      - graph kind and size (WxH cells for mazes, node count otherwise)
      - random seed
      - the algorithm, if given
      - a timestamp + short UUID suffix to guarantee uniqueness

    Example:
        outputs/run_maze15x15_seed0_AStar_20251216-213012-ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    if cfg.graph_kind == "maze":
        size = f"maze{cfg.width}x{cfg.height}"
    else:
        size = f"{cfg.graph_kind}{cfg.node_count}"

    parts = [size, f"seed{cfg.seed}"]
    if path_algo_name:
        parts.append(path_algo_name)

    base_name = "run_" + "_".join(parts)

    # Add a timestamp and a short random suffix so that repeated runs
    # with the same config do not overwrite each other.
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    suffix = f"{ts}-{uid}"

    run_dir = base_path / f"{base_name}_{suffix}"

    # exist_ok=False => raise if directory somehow already exists
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """
    Serialize the Config object for this run into JSON.

    Together with the seed this is enough to regenerate the exact graph.
    """
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Save the summary metrics for a run as a JSON file.

    The structure is nested (e.g. "result.path_hops",
    "pathfinding.total_runtime") so it can be flattened into CSV columns
    the same way batch_run.py does.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)


def save_trace(steps: Iterable[Any], run_dir: Path, filename: str = "trace.json") -> Path:
    """
    Write a step trace as a JSON list, one object per event, in trace order.

    Any step type with a to_dict() method works (PathStep, BFSStep, TourStep).
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump([s.to_dict() for s in steps], f, indent=2)
    return out_path
