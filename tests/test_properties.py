"""Tests for graphs/properties.py"""

import pytest

from graphs.core import directed_graph, undirected_graph
from graphs.properties import (
    is_bipartite,
    is_complete,
    is_eulerian,
    is_hamiltonian,
    is_regular,
)


@pytest.fixture
def square():
    return undirected_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def k4():
    return undirected_graph(4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])


class TestSquareAndK4:
    """A 4-cycle and the complete graph on four vertices side by side."""

    def test_complete(self, square, k4):
        assert not is_complete(square)
        assert is_complete(k4)

    def test_regular(self, square, k4):
        assert is_regular(square)
        assert is_regular(k4)

    def test_bipartite(self, square, k4):
        assert is_bipartite(square)
        assert not is_bipartite(k4)

    def test_eulerian(self, square, k4):
        """Every degree in K4 is 3."""
        assert is_eulerian(square)
        assert not is_eulerian(k4)

    def test_hamiltonian(self, square, k4):
        assert is_hamiltonian(square)
        assert is_hamiltonian(k4)


class TestIsComplete:
    def test_triangle(self):
        assert is_complete(undirected_graph(3, [(0, 1), (1, 2), (2, 0)]))

    def test_directed_both_ways(self):
        edges = [(u, v) for u in range(3) for v in range(3) if u != v]
        assert is_complete(directed_graph(3, edges))

    def test_directed_one_way_missing(self):
        edges = [(u, v) for u in range(3) for v in range(3) if u != v and (u, v) != (2, 0)]
        assert not is_complete(directed_graph(3, edges))

    def test_directed_tournament_is_not_complete(self):
        assert not is_complete(directed_graph(3, [(0, 1), (1, 2), (0, 2)]))


class TestIsRegular:
    def test_path_is_not_regular(self):
        assert not is_regular(undirected_graph(3, [(0, 1), (1, 2)]))

    def test_no_edges(self):
        assert is_regular(undirected_graph(3, []))

    def test_directed_cycle(self):
        assert is_regular(directed_graph(3, [(0, 1), (1, 2), (2, 0)]))

    def test_directed_path(self):
        assert not is_regular(directed_graph(3, [(0, 1), (1, 2)]))

    def test_directed_in_degrees_differ(self):
        """Out-degrees are all 1 but vertex 2 receives two edges."""
        graph = directed_graph(3, [(0, 2), (1, 2), (2, 0)])
        assert not is_regular(graph)


class TestIsHamiltonian:
    def test_too_small(self):
        assert not is_hamiltonian(undirected_graph(2, [(0, 1)]))
        assert not is_hamiltonian(undirected_graph(0, []))

    def test_triangle(self):
        assert is_hamiltonian(undirected_graph(3, [(0, 1), (1, 2), (2, 0)]))

    def test_bowtie_fails_bound(self):
        """Vertex 0 has degree 2: 2 * 2 < 5, although 2 >= 5 // 2."""
        graph = undirected_graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
        assert not is_hamiltonian(graph)

    def test_odd_vertex_count_not_rounded_down(self):
        """Degrees of 2 in a 5-cycle fall short of 5 / 2."""
        graph = undirected_graph(5, [(v, (v + 1) % 5) for v in range(5)])
        assert not is_hamiltonian(graph)

    def test_odd_vertex_count_meeting_bound(self):
        """Every degree is at least 3 and 2 * 3 >= 5; one edge short of complete."""
        edges = [(v, (v + 1) % 5) for v in range(5)] + [(0, 2), (1, 3), (2, 4), (3, 0)]
        graph = undirected_graph(5, edges)
        assert is_hamiltonian(graph)

    def test_sufficient_only(self):
        """A 6-cycle has a Hamiltonian cycle but degrees of 2 are below 6 / 2."""
        graph = undirected_graph(6, [(v, (v + 1) % 6) for v in range(6)])
        assert not is_hamiltonian(graph)

    def test_directed_rejected(self):
        with pytest.raises(ValueError, match="undirected"):
            is_hamiltonian(directed_graph(3, [(0, 1), (1, 2), (2, 0)]))


class TestIsEulerian:
    def test_triangle(self):
        assert is_eulerian(undirected_graph(3, [(0, 1), (1, 2), (2, 0)]))

    def test_path(self):
        assert not is_eulerian(undirected_graph(3, [(0, 1), (1, 2)]))

    def test_even_degrees_but_disconnected(self):
        graph = undirected_graph(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
        assert not is_eulerian(graph)

    def test_bowtie(self):
        graph = undirected_graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
        assert is_eulerian(graph)


class TestIsBipartite:
    def test_even_cycle(self, square):
        assert is_bipartite(square)

    def test_odd_cycle(self):
        assert not is_bipartite(undirected_graph(3, [(0, 1), (1, 2), (2, 0)]))

    def test_tree(self):
        assert is_bipartite(undirected_graph(4, [(0, 1), (0, 2), (2, 3)]))

    def test_self_loop(self):
        assert not is_bipartite(undirected_graph(2, [(0, 0), (0, 1)]))

    def test_odd_cycle_in_second_component(self):
        """The component of vertex 0 is bipartite; the triangle on 2, 3, 4 is not."""
        graph = undirected_graph(5, [(0, 1), (2, 3), (3, 4), (4, 2)])
        assert not is_bipartite(graph)

    def test_isolated_vertex_zero(self):
        graph = undirected_graph(3, [(1, 2)])
        assert is_bipartite(graph)

    def test_no_edges(self):
        assert not is_bipartite(undirected_graph(0, []))
        assert not is_bipartite(undirected_graph(4, []))

    def test_directed_rejected(self):
        with pytest.raises(ValueError, match="undirected"):
            is_bipartite(directed_graph(2, [(0, 1)]))
