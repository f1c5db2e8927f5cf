"""Tests for the random general-graph generator."""

from math import isclose

import pytest

from graph_gen import GraphGeneratorOptions, find_opposite_corner_nodes, generate_random_graph
from graph_model import Graph

from conftest import graph_from_edges


class TestCircularLayout:
    """Spanning tree plus random extra edges towards an average degree."""

    def test_tree_when_target_is_low(self):
        graph = generate_random_graph(GraphGeneratorOptions(node_count=10, avg_degree=1.8, seed=1))
        assert len(graph) == 10
        assert graph.edge_count() == 9
        assert graph.is_connected()

    @pytest.mark.parametrize("seed", range(5))
    def test_connected_and_bounded(self, seed):
        graph = generate_random_graph(GraphGeneratorOptions(node_count=20, avg_degree=4, seed=seed))
        graph.validate()
        assert graph.is_connected()
        assert 19 <= graph.edge_count() <= 40

    def test_no_self_loops_or_duplicates(self):
        graph = generate_random_graph(GraphGeneratorOptions(node_count=12, avg_degree=6, seed=5))
        for node in graph.nodes.values():
            assert node.id not in node.neighbors
            assert len(set(node.neighbors)) == len(node.neighbors)

    def test_ids_and_positions(self):
        graph = generate_random_graph(GraphGeneratorOptions(node_count=8, avg_degree=2, seed=0))
        assert list(graph.nodes) == [f"n{i}" for i in range(8)]
        assert not graph.is_grid
        n0 = graph.nodes["n0"]
        assert isclose(n0.x, 500.0) and isclose(n0.y, 300.0)
        for node in graph.nodes.values():
            assert isclose((node.x - 300) ** 2 + (node.y - 300) ** 2, 200 ** 2)

    def test_single_node(self):
        graph = generate_random_graph(GraphGeneratorOptions(node_count=1, avg_degree=3, seed=0))
        assert len(graph) == 1
        assert graph.edge_count() == 0


class TestCloudLayout:
    """Proximity connections under a degree cap, plus a repair pass."""

    def test_positions_inside_padded_canvas(self):
        opts = GraphGeneratorOptions(node_count=40, max_connections_per_node=3, connection_radius=100, seed=2)
        graph = generate_random_graph(opts)
        for node in graph.nodes.values():
            assert 50 <= node.x <= 550
            assert 50 <= node.y <= 550

    def test_no_isolated_nodes_and_cap_respected(self):
        opts = GraphGeneratorOptions(node_count=30, max_connections_per_node=4, connection_radius=120, seed=7)
        graph = generate_random_graph(opts)
        graph.validate()
        for nid in graph.nodes:
            assert 1 <= graph.degree(nid) <= 4

    def test_repair_ignores_radius(self):
        """With a zero radius every edge comes from the repair pass."""
        opts = GraphGeneratorOptions(node_count=10, max_connections_per_node=3, connection_radius=0.0, seed=4)
        graph = generate_random_graph(opts)
        assert all(graph.degree(nid) >= 1 for nid in graph.nodes)

    def test_unbounded_radius_and_cap_gives_complete_graph(self):
        n = 7
        opts = GraphGeneratorOptions(node_count=n, max_connections_per_node=n - 1, seed=3)
        graph = generate_random_graph(opts)
        assert graph.edge_count() == n * (n - 1) // 2

    def test_neighbors_sorted_by_distance_for_first_node(self):
        n = 6
        opts = GraphGeneratorOptions(node_count=n, max_connections_per_node=n - 1, seed=10)
        graph = generate_random_graph(opts)
        n0 = graph.nodes["n0"]

        def d(nid):
            other = graph.nodes[nid]
            return (other.x - n0.x) ** 2 + (other.y - n0.y) ** 2

        dists = [d(nid) for nid in n0.neighbors]
        assert dists == sorted(dists)


class TestReproducibility:
    """Same seed and options give identical graphs."""

    @pytest.mark.parametrize(
        "opts",
        [
            GraphGeneratorOptions(node_count=25, avg_degree=3.5, seed=123),
            GraphGeneratorOptions(node_count=25, max_connections_per_node=3, connection_radius=150, seed=123),
        ],
    )
    def test_identical_output(self, opts):
        a = generate_random_graph(opts)
        b = generate_random_graph(opts)
        assert a == b
        assert a.edges() == b.edges()

    def test_different_seeds_differ(self):
        a = generate_random_graph(GraphGeneratorOptions(node_count=15, max_connections_per_node=3, seed=1))
        b = generate_random_graph(GraphGeneratorOptions(node_count=15, max_connections_per_node=3, seed=2))
        assert [(n.x, n.y) for n in a.nodes.values()] != [(n.x, n.y) for n in b.nodes.values()]

    def test_injected_source_wins_over_seed(self):
        from rng import lcg

        opts = GraphGeneratorOptions(node_count=10, avg_degree=3, seed=1)
        assert generate_random_graph(opts, rand=lcg(2)) == generate_random_graph(
            GraphGeneratorOptions(node_count=10, avg_degree=3, seed=2)
        )


class TestValidation:
    """Option errors."""

    def test_missing_policy_fields(self):
        with pytest.raises(ValueError):
            generate_random_graph(GraphGeneratorOptions(node_count=5))

    def test_zero_nodes(self):
        with pytest.raises(ValueError):
            generate_random_graph(GraphGeneratorOptions(node_count=0, avg_degree=2))


class TestOppositeCorners:
    """find_opposite_corner_nodes picks min / max of x + y."""

    def test_circular_layout(self):
        graph = generate_random_graph(GraphGeneratorOptions(node_count=8, avg_degree=2, seed=0))
        assert find_opposite_corner_nodes(graph) == ("n5", "n1")

    def test_line_graph(self):
        graph = graph_from_edges(["A", "B", "C"], [("A", "B"), ("B", "C")])
        assert find_opposite_corner_nodes(graph) == ("A", "C")

    def test_empty_graph(self):
        with pytest.raises(ValueError):
            find_opposite_corner_nodes(Graph())
