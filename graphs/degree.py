"""
Degree queries.

Undirected graphs count adjacency entries (a self-loop counts twice). Directed
graphs split the degree into in-degree, which needs a scan of every adjacency
list, and out-degree, which is the length of the vertex's own list.

Every query returns 0 for a vertex outside the graph, and the min/max queries
return 0 for graphs with fewer than two vertices or no edges.
"""

from collections.abc import Callable

from graphs.core import Graph, is_valid_vertex, require_directed
from graphs.types import Vertex


def out_degree(graph: Graph, vertex: Vertex) -> int:
    require_directed(graph, "out_degree")
    if not is_valid_vertex(graph, vertex):
        return 0
    return len(graph.adjacency[vertex])


def in_degree(graph: Graph, vertex: Vertex) -> int:
    require_directed(graph, "in_degree")
    if not is_valid_vertex(graph, vertex):
        return 0
    return sum(
        1
        for neighbors in graph.adjacency
        for neighbor in neighbors
        if neighbor.vertex == vertex
    )


def degree(graph: Graph, vertex: Vertex) -> int:
    """In-degree plus out-degree for directed graphs, incident entries otherwise."""
    if not is_valid_vertex(graph, vertex):
        return 0
    if graph.directed:
        return in_degree(graph, vertex) + out_degree(graph, vertex)
    return len(graph.adjacency[vertex])


def _is_degenerate(graph: Graph) -> bool:
    return graph.vertex_count <= 1 or graph.edge_count == 0


def _extreme(
    graph: Graph,
    measure: Callable[[Graph, Vertex], int],
    pick: Callable[..., int],
) -> int:
    if _is_degenerate(graph):
        return 0
    return pick(measure(graph, vertex) for vertex in range(graph.vertex_count))


def min_degree(graph: Graph) -> int:
    return _extreme(graph, degree, min)


def max_degree(graph: Graph) -> int:
    return _extreme(graph, degree, max)


def min_in_degree(graph: Graph) -> int:
    require_directed(graph, "min_in_degree")
    return _extreme(graph, in_degree, min)


def max_in_degree(graph: Graph) -> int:
    require_directed(graph, "max_in_degree")
    return _extreme(graph, in_degree, max)


def min_out_degree(graph: Graph) -> int:
    require_directed(graph, "min_out_degree")
    return _extreme(graph, out_degree, min)


def max_out_degree(graph: Graph) -> int:
    require_directed(graph, "max_out_degree")
    return _extreme(graph, out_degree, max)


def density(graph: Graph) -> float:
    """
    Fraction of the possible edges that are present.

    E / (V(V-1)) for directed graphs, 2E / (V(V-1)) for undirected ones, and
    0.0 when the graph has fewer than two vertices.
    """
    if graph.vertex_count < 2:
        return 0.0
    possible = graph.vertex_count * (graph.vertex_count - 1)
    edges = graph.edge_count if graph.directed else 2 * graph.edge_count
    return edges / possible


__all__ = [
    "degree",
    "density",
    "in_degree",
    "max_degree",
    "max_in_degree",
    "max_out_degree",
    "min_degree",
    "min_in_degree",
    "min_out_degree",
    "out_degree",
]
