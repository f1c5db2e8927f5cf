"""Tests for the batch runner and CSV plotting."""

import pandas as pd
import pytest

from batch_run import main_batch, run_experiment
from plot_utils import load_results, plot_boxplots_from_csv


def params(**overrides):
    base = dict(
        purpose="test",
        graph_kind="maze",
        width=5,
        height=5,
        wall_removal_percent=10.0,
        node_count=10,
        n_goals=2,
        path_algo_name="Dijkstra",
        tour_algo_name="ExactBruteForce",
        seed=1,
    )
    base.update(overrides)
    return base


class TestExperiments:
    """One run per grid combination, collected into a CSV."""

    def test_single_experiment(self):
        row = run_experiment(params())
        assert row["purpose"] == "test"
        assert row["seed"] == 1
        assert row["result"]["found"] is True
        assert row["pathfinding"]["algorithm"] == "Dijkstra"
        assert row["pathfinding"]["call_count"] == 1
        assert row["tours"]["found"] is True

    def test_invalid_combination_returns_none(self, capsys):
        assert run_experiment(params(graph_kind="circular", path_algo_name="AStar")) is None
        assert "[ERROR]" in capsys.readouterr().out

    def test_csv_columns(self, tmp_path):
        grid = {k: [v] for k, v in params().items()}
        grid["path_algo_name"] = ["Dijkstra", "BidirectionalBFS"]
        out = main_batch(out_dir=tmp_path, grid=grid, processes=1)
        df = pd.read_csv(out)
        assert len(df) == 2
        assert df.columns[0] == "purpose"
        assert {"seed", "result.found", "pathfinding.call_count", "tours.tested"} <= set(df.columns)
        assert set(df["pathfinding.algorithm"]) == {"Dijkstra", "BidirectionalBFS"}
        assert (df["pathfinding.call_count"] == 1).all()

    def test_failed_runs_are_dropped(self, tmp_path):
        grid = {k: [v] for k, v in params(graph_kind="circular", n_goals=0).items()}
        grid["path_algo_name"] = ["AStar", "Dijkstra"]
        df = pd.read_csv(main_batch(out_dir=tmp_path, grid=grid, processes=1))
        assert list(df["pathfinding.algorithm"]) == ["Dijkstra"]

    def test_nothing_written_when_all_fail(self, tmp_path):
        grid = {k: [v] for k, v in params(graph_kind="cloud", path_algo_name="AStar").items()}
        assert main_batch(out_dir=tmp_path, grid=grid, processes=1) is None
        assert not (tmp_path / "batch_results.csv").exists()


@pytest.fixture
def results_csv(tmp_path):
    df = pd.DataFrame(
        {
            "pathfinding.algorithm": ["Dijkstra", "Dijkstra", "AStar", "AStar"],
            "graph.kind": ["maze"] * 4,
            "result.expanded": [20, 24, 9, 11],
        }
    )
    path = tmp_path / "batch_results.csv"
    df.to_csv(path, index=False)
    return path


class TestPlots:
    def test_load_results_group_label(self, results_csv):
        df = load_results(results_csv, ["pathfinding.algorithm", "graph.kind"], ["result.expanded"])
        assert df["__group_label__"].iloc[0] == "Dijkstra | maze"

    def test_missing_column(self, results_csv):
        with pytest.raises(ValueError):
            load_results(results_csv, ["nope"], ["result.expanded"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(tmp_path / "missing.csv", ["a"], ["b"])

    def test_boxplot_pdf(self, results_csv, tmp_path, capsys):
        written = plot_boxplots_from_csv(
            results_csv,
            group_by=["pathfinding.algorithm"],
            metrics=["result.expanded"],
            output_dir=tmp_path / "plots",
            show=False,
        )
        assert len(written) == 1
        assert written[0].suffix == ".pdf" and written[0].exists()
        assert "[STATS] result.expanded" in capsys.readouterr().out
