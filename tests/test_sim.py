"""Tests for graph building, the Simulator, run I/O and the single-run driver."""

import json

import pytest

from config import Config
from io_utils import make_run_dir, save_config, save_summary, save_trace
from main import main
from sim import Simulator, build_graph, default_endpoints

from conftest import graph_from_edges


class TestBuildGraph:
    """Config -> generated graph."""

    def test_maze(self):
        graph = build_graph(Config(width=6, height=4, seed=1))
        assert graph.is_grid
        assert len(graph) == 24

    @pytest.mark.parametrize("kind", ["circular", "cloud"])
    def test_general(self, kind):
        graph = build_graph(Config(graph_kind=kind, node_count=12, seed=2))
        assert not graph.is_grid
        assert len(graph) == 12

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_graph(Config(graph_kind="hexagonal"))

    def test_default_endpoints_grid(self, perfect_maze):
        assert default_endpoints(perfect_maze) == ("0,0", "4,4")

    def test_default_endpoints_general(self):
        graph = graph_from_edges(["A", "B", "C"], [("A", "B"), ("B", "C")])
        assert default_endpoints(graph) == ("A", "C")


class TestSimulator:
    """Setup validation, run and summary."""

    def test_defaults(self):
        sim = Simulator(cfg=Config(width=5, height=5))
        assert (sim.start, sim.end) == ("0,0", "4,4")
        assert sim.goals == []
        assert sim.path_algo.name == "AStar"

    def test_explicit_endpoints_and_goals(self):
        cfg = Config(width=5, height=5, start="1,1", end="3,2", goals=["0,4", "4,0"])
        sim = Simulator(cfg=cfg, path_algo_name="Dijkstra")
        assert (sim.start, sim.end) == ("1,1", "3,2")
        assert sim.goals == ["0,4", "4,0"]

    def test_unknown_algorithms(self):
        with pytest.raises(ValueError):
            Simulator(cfg=Config(width=3, height=3), path_algo_name="Greedy")
        with pytest.raises(ValueError):
            Simulator(cfg=Config(width=3, height=3), tour_algo_name="Annealing")

    def test_astar_rejected_on_general_graph(self):
        with pytest.raises(ValueError):
            Simulator(cfg=Config(graph_kind="circular", node_count=8), path_algo_name="AStar")

    def test_random_goals(self):
        cfg = Config(width=6, height=6, n_goals=3, seed=4)
        a = Simulator(cfg=cfg)
        b = Simulator(cfg=cfg)
        assert len(a.goals) == 3
        assert len(set(a.goals)) == 3
        assert a.start not in a.goals
        assert a.goals == b.goals

    def test_too_many_goals(self):
        with pytest.raises(ValueError):
            Simulator(cfg=Config(width=2, height=2, n_goals=4))

    def test_summary_before_run(self):
        sim = Simulator(cfg=Config(width=3, height=3))
        with pytest.raises(RuntimeError):
            sim.summary()

    def test_run_and_summary(self):
        cfg = Config(graph_kind="cloud", node_count=15, n_goals=2, seed=3)
        sim = Simulator(cfg=cfg, path_algo_name="BidirectionalBFS")
        sim.path_algo.reset_stats()
        result = sim.run()
        summary = sim.summary()

        assert summary["graph"]["kind"] == "cloud"
        assert summary["graph"]["nodes"] == 15
        assert summary["result"]["found"] == result.found
        assert summary["result"]["trace_steps"] == len(result.steps)
        assert summary["result"]["path_hops"] == max(len(result.path) - 1, 0)
        assert summary["result"]["expanded"] == sum(1 for s in result.steps if s.type.startswith("current"))
        assert summary["pathfinding"]["algorithm"] == "BidirectionalBFS"
        assert summary["pathfinding"]["call_count"] == 1
        assert summary["tours"]["goals"] == sim.goals
        assert summary["tours"]["tested"] == sim.tour_result.tested

    @pytest.mark.parametrize("name", ["Dijkstra", "AStar", "BidirectionalBFS"])
    def test_tour_segments_not_counted_as_pathfinder_calls(self, name):
        sim = Simulator(cfg=Config(width=6, height=6, n_goals=3, seed=1), path_algo_name=name)
        sim.path_algo.reset_stats()
        sim.tour_algo.reset_stats()
        sim.run()
        summary = sim.summary()
        assert summary["pathfinding"]["call_count"] == 1
        assert summary["tours"]["call_count"] == 1

    def test_no_tour_section_without_goals(self):
        sim = Simulator(cfg=Config(width=4, height=4), path_algo_name="Dijkstra")
        sim.run()
        assert "tours" not in sim.summary()
        assert sim.tour_result is None

    def test_logging(self, capsys):
        sim = Simulator(cfg=Config(width=4, height=4), log_events=True)
        sim.run()
        out = capsys.readouterr().out
        assert "[INIT]" in out
        assert "[GRAPH] 16 nodes" in out
        assert "[RESULT] found=True" in out

    def test_quiet_by_default(self, capsys):
        Simulator(cfg=Config(width=4, height=4)).run()
        assert capsys.readouterr().out == ""


class TestRunFiles:
    """Run directory and JSON outputs."""

    def test_run_dir_name(self, tmp_path):
        run_dir = make_run_dir(Config(width=7, height=5, seed=3), base=tmp_path, path_algo_name="Dijkstra")
        assert run_dir.is_dir()
        assert run_dir.name.startswith("run_maze7x5_seed3_Dijkstra_")

    def test_run_dir_general_graph(self, tmp_path):
        run_dir = make_run_dir(Config(graph_kind="cloud", node_count=30, seed=1), base=tmp_path)
        assert run_dir.name.startswith("run_cloud30_seed1_")

    def test_run_dirs_are_unique(self, tmp_path):
        cfg = Config()
        assert make_run_dir(cfg, base=tmp_path) != make_run_dir(cfg, base=tmp_path)

    def test_config_and_summary(self, tmp_path):
        cfg = Config(width=3, height=3, goals=["2,2"])
        save_config(cfg, tmp_path)
        save_summary({"result": {"found": True}}, tmp_path)
        assert json.loads((tmp_path / "config.json").read_text())["goals"] == ["2,2"]
        assert json.loads((tmp_path / "summary.json").read_text()) == {"result": {"found": True}}

    def test_trace_roundtrip(self, tmp_path, perfect_maze):
        from pathfinding import dijkstra

        result = dijkstra(perfect_maze, "0,0", "4,4")
        path = save_trace(result.steps, tmp_path)
        loaded = json.loads(path.read_text())
        assert len(loaded) == len(result.steps)
        assert loaded[0] == {"node_id": "0,0", "type": "current", "distance": 0}
        assert loaded[-1] == {"node_id": "4,4", "type": "path"}


class TestMain:
    """End-to-end single run."""

    def test_maze_run_writes_outputs(self, tmp_path):
        cfg = Config(width=5, height=5, n_goals=2, fps=5, log_events=False)
        run_dir = main(cfg, base=tmp_path)
        for name in [
            "config.json",
            "summary.json",
            "trace.json",
            "tour_trace.json",
            "graph.png",
            "solution.png",
            "tour.png",
            "trace.gif",
        ]:
            assert (run_dir / name).exists(), name
        summary = json.loads((run_dir / "summary.json").read_text())
        assert summary["result"]["found"] is True

    def test_general_graph_run(self, tmp_path):
        cfg = Config(
            graph_kind="circular",
            node_count=10,
            path_algo_name="BidirectionalBFS",
            fps=5,
            log_events=False,
        )
        run_dir = main(cfg, base=tmp_path)
        assert (run_dir / "trace.gif").exists()
        assert not (run_dir / "tour_trace.json").exists()
