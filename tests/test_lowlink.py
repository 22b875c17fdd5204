"""Tests for graphs/lowlink.py"""

import numpy as np
import pytest
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components as scipy_components

from graphs.components import connected_components
from graphs.core import directed_graph, undirected_graph
from graphs.lowlink import (
    articulation_points,
    biconnected_components,
    is_biconnected,
    strongly_connected_components,
)


# =============================================================================
# Fixtures and helpers
# =============================================================================


@pytest.fixture
def bowtie():
    """
    Two triangles sharing vertex 2:

    0       3
    | \\   / |
    |   2   |
    | /   \\ |
    1       4
    """
    return undirected_graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])


UNDIRECTED_CASES = [
    (5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)]),
    (4, [(0, 1), (1, 2), (2, 3)]),
    (4, [(0, 1), (1, 2), (1, 3)]),
    (6, [(0, 1), (1, 2), (2, 0), (3, 4)]),
    (7, [(0, 1), (1, 2), (2, 3), (3, 0), (3, 4), (4, 5), (5, 6), (6, 4)]),
    (5, [(0, 1), (0, 2), (0, 3), (0, 4)]),
    (4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)]),
]


def brute_force_cut_vertices(vertex_count, edges):
    """Vertices whose removal increases the number of components."""
    baseline = len(connected_components(undirected_graph(vertex_count, edges)))
    cut = set()
    for removed in range(vertex_count):
        remaining = [(u, v) for u, v in edges if removed not in (u, v)]
        # The removed vertex stays behind as an isolated component of its own
        after = len(connected_components(undirected_graph(vertex_count, remaining))) - 1
        if after > baseline:
            cut.add(removed)
    return cut


def scipy_scc_count(vertex_count, edges):
    rows = [u for u, _ in edges]
    cols = [v for _, v in edges]
    matrix = csr_matrix(
        (np.ones(len(edges)), (rows, cols)), shape=(vertex_count, vertex_count)
    )
    count, _ = scipy_components(matrix, directed=True, connection="strong")
    return count


# =============================================================================
# Articulation points
# =============================================================================


class TestArticulationPoints:
    def test_bowtie(self, bowtie):
        assert articulation_points(bowtie) == (2,)

    def test_path(self):
        """Inner vertices of a path, deepest first."""
        graph = undirected_graph(4, [(0, 1), (1, 2), (2, 3)])
        assert articulation_points(graph) == (2, 1)

    def test_reported_once(self):
        """Vertex 1 separates two subtrees but is listed a single time."""
        graph = undirected_graph(4, [(0, 1), (1, 2), (1, 3)])
        assert articulation_points(graph) == (1,)

    def test_star_root(self):
        graph = undirected_graph(4, [(0, 1), (0, 2), (0, 3)])
        assert articulation_points(graph) == (0,)

    def test_cycle_has_none(self):
        graph = undirected_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        assert articulation_points(graph) == ()

    def test_every_component_searched(self):
        graph = undirected_graph(6, [(0, 1), (1, 2), (3, 4), (4, 5)])
        assert set(articulation_points(graph)) == {1, 4}

    def test_empty(self):
        assert articulation_points(undirected_graph(0, [])) == ()

    @pytest.mark.parametrize("vertex_count, edges", UNDIRECTED_CASES)
    def test_matches_brute_force(self, vertex_count, edges):
        graph = undirected_graph(vertex_count, edges)
        found = articulation_points(graph)
        assert len(found) == len(set(found))
        assert set(found) == brute_force_cut_vertices(vertex_count, edges)

    def test_repeated_calls_agree(self, bowtie):
        assert articulation_points(bowtie) == articulation_points(bowtie)

    def test_directed_rejected(self):
        with pytest.raises(ValueError, match="undirected"):
            articulation_points(directed_graph(2, [(0, 1)]))


class TestIsBiconnected:
    def test_cycle(self):
        assert is_biconnected(undirected_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)]))

    def test_single_edge(self):
        assert is_biconnected(undirected_graph(2, [(0, 1)]))

    def test_bowtie(self, bowtie):
        assert not is_biconnected(bowtie)

    def test_path(self):
        assert not is_biconnected(undirected_graph(3, [(0, 1), (1, 2)]))

    def test_disconnected(self):
        """Two triangles: no cut vertex, but not every vertex is reached."""
        graph = undirected_graph(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
        assert not is_biconnected(graph)

    def test_no_edges(self):
        assert not is_biconnected(undirected_graph(0, []))
        assert not is_biconnected(undirected_graph(3, []))

    @pytest.mark.parametrize("vertex_count, edges", UNDIRECTED_CASES)
    def test_consistent_with_cut_vertices(self, vertex_count, edges):
        graph = undirected_graph(vertex_count, edges)
        expected = (
            len(connected_components(graph)) == 1
            and not brute_force_cut_vertices(vertex_count, edges)
        )
        assert is_biconnected(graph) == expected


class TestBiconnectedComponents:
    def test_bowtie(self, bowtie):
        assert biconnected_components(bowtie) == ((4, 3, 2), (2, 1, 0))

    def test_path(self):
        """Each edge of a path is its own component."""
        graph = undirected_graph(3, [(0, 1), (1, 2)])
        assert biconnected_components(graph) == ((2, 1), (1, 0))

    def test_cycle_is_one_component(self):
        graph = undirected_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        components = biconnected_components(graph)
        assert len(components) == 1
        assert sorted(components[0]) == [0, 1, 2, 3]

    def test_isolated_vertices_excluded(self):
        graph = undirected_graph(4, [(1, 2)])
        assert biconnected_components(graph) == ((2, 1),)

    def test_cut_vertices_are_shared(self):
        graph = undirected_graph(
            7, [(0, 1), (1, 2), (2, 3), (3, 0), (3, 4), (4, 5), (5, 6), (6, 4)]
        )
        components = [set(c) for c in biconnected_components(graph)]
        assert {0, 1, 2, 3} in components
        assert {3, 4} in components
        assert {4, 5, 6} in components
        assert len(components) == 3

    def test_repeated_calls_agree(self, bowtie):
        assert biconnected_components(bowtie) == biconnected_components(bowtie)

    def test_directed_rejected(self):
        with pytest.raises(ValueError, match="undirected"):
            biconnected_components(directed_graph(2, [(0, 1)]))


# =============================================================================
# Strongly connected components
# =============================================================================


class TestStronglyConnectedComponents:
    def test_cycle_with_tail_cycle(self):
        graph = directed_graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3)])
        assert strongly_connected_components(graph) == ((4, 3), (2, 1, 0))

    def test_dag_gives_singletons(self):
        graph = directed_graph(3, [(0, 1), (1, 2)])
        assert strongly_connected_components(graph) == ((2,), (1,), (0,))

    def test_cross_edge_into_finished_component(self):
        """The edge 2 -> 1 leads into a completed component and is ignored."""
        graph = directed_graph(3, [(0, 1), (0, 2), (2, 1)])
        assert strongly_connected_components(graph) == ((1,), (2,), (0,))

    def test_later_root(self):
        graph = directed_graph(3, [(0, 1), (1, 0), (2, 0)])
        assert strongly_connected_components(graph) == ((1, 0), (2,))

    def test_partition(self):
        graph = directed_graph(
            6, [(0, 1), (1, 0), (1, 2), (2, 3), (3, 4), (4, 2), (5, 5)]
        )
        components = strongly_connected_components(graph)
        members = [vertex for component in components for vertex in component]
        assert sorted(members) == list(range(6))

    def test_empty(self):
        assert strongly_connected_components(directed_graph(0, [])) == ()

    def test_repeated_calls_agree(self):
        graph = directed_graph(4, [(0, 1), (1, 2), (2, 0), (3, 2)])
        assert strongly_connected_components(graph) == strongly_connected_components(
            graph
        )

    def test_deep_cycle(self):
        """No recursion: a long cycle is a single component."""
        size = 4000
        edges = [(v, (v + 1) % size) for v in range(size)]
        components = strongly_connected_components(directed_graph(size, edges))
        assert len(components) == 1
        assert len(components[0]) == size

    @pytest.mark.parametrize(
        "vertex_count, edges",
        [
            (5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3)]),
            (3, [(0, 1), (0, 2), (2, 1)]),
            (6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (2, 3)]),
            (6, [(5, 4), (4, 3), (3, 2), (2, 1), (1, 0)]),
            (4, [(0, 1), (1, 2), (2, 3), (3, 1)]),
        ],
    )
    def test_count_matches_scipy(self, vertex_count, edges):
        graph = directed_graph(vertex_count, edges)
        found = strongly_connected_components(graph)
        assert len(found) == scipy_scc_count(vertex_count, edges)

    def test_undirected_rejected(self):
        with pytest.raises(ValueError, match="directed"):
            strongly_connected_components(undirected_graph(2, [(0, 1)]))
