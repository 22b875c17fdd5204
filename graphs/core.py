"""
Adjacency-list graph shared by every algorithm of the package.

A single immutable `Graph` value covers the four kinds of graphs (directed or
undirected, weighted or not). Algorithms are free functions over it; the ones
that only make sense for one kind call `require_directed` or
`require_undirected` first.

Construction:
    undirected_graph(vertex_count, edges, weighted) - Reciprocal entries per edge
    directed_graph(vertex_count, edges, weighted)   - One entry per edge
    tree(vertex_count, edges)                       - Undirected, V - 1 edges

Algebra (new values, operands untouched):
    a + b  - Per-vertex union of adjacency entries
    a - b  - Entries of a that b does not have at the same vertex
    a == b - Same kind, size and per-vertex multiset of entries
"""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from graphs.constants import UNWEIGHTED
from graphs.types import Adjacency, AdjacencyList, EdgeInput, Neighbor, Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Graph:
    """
    Static graph stored as one adjacency list per vertex.

    Attributes:
        vertex_count: Number of vertices; vertices are 0 .. vertex_count - 1.
        edge_count: Number of edges the graph was built from.
        adjacency: adjacency[u] lists the (vertex, weight) entries leaving u.
            An undirected edge is stored at both of its ends.
        directed: Whether edges have an orientation.
        weighted: Whether edge weights are meaningful (0 otherwise).
    """

    vertex_count: int
    edge_count: int
    adjacency: Adjacency
    directed: bool = False
    weighted: bool = False

    def __add__(self, other: object) -> "Graph":
        if not isinstance(other, Graph):
            return NotImplemented
        return graph_union(self, other)

    def __sub__(self, other: object) -> "Graph":
        if not isinstance(other, Graph):
            return NotImplemented
        return graph_difference(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return graphs_equal(self, other)

    def __hash__(self) -> int:
        return hash(
            (
                self.directed,
                self.weighted,
                self.vertex_count,
                self.edge_count,
                tuple(frozenset(Counter(entries).items()) for entries in self.adjacency),
            )
        )


# =============================================================================
# Construction
# =============================================================================


def _build(
    vertex_count: int,
    edges: Iterable[EdgeInput],
    directed: bool,
    weighted: bool,
) -> Graph:
    if vertex_count < 0:
        raise ValueError(f"Vertex count must be non-negative, got {vertex_count}")

    lists: list[list[Neighbor]] = [[] for _ in range(vertex_count)]
    edge_count = 0
    for edge in edges:
        if weighted and len(edge) != 3:
            raise ValueError(f"Weighted graph expects (source, destination, weight), got {edge}")
        source, destination = edge[0], edge[1]
        for end in (source, destination):
            if not 0 <= end < vertex_count:
                raise ValueError(
                    f"Edge {edge} references vertex {end} outside [0, {vertex_count})"
                )
        weight = edge[2] if weighted else UNWEIGHTED

        lists[source].append(Neighbor(destination, weight))
        if not directed:
            lists[destination].append(Neighbor(source, weight))
        edge_count += 1

    logger.debug(
        f"Built {'directed' if directed else 'undirected'} graph: "
        f"{vertex_count} vertices, {edge_count} edges"
    )
    return Graph(
        vertex_count=vertex_count,
        edge_count=edge_count,
        adjacency=tuple(tuple(entries) for entries in lists),
        directed=directed,
        weighted=weighted,
    )


def undirected_graph(
    vertex_count: int, edges: Iterable[EdgeInput], weighted: bool = False
) -> Graph:
    """
    Builds an undirected graph from an edge list.

    Args:
        vertex_count: Number of vertices.
        edges: (u, v) pairs, or (u, v, w) triples when weighted.
        weighted: Whether the third component of each edge is a weight.

    Raises:
        ValueError: If an edge names a vertex outside [0, vertex_count) or a
            weighted edge has no weight.
    """
    return _build(vertex_count, edges, directed=False, weighted=weighted)


def directed_graph(
    vertex_count: int, edges: Iterable[EdgeInput], weighted: bool = False
) -> Graph:
    """Builds a directed graph; (u, v) is stored only in adjacency[u]."""
    return _build(vertex_count, edges, directed=True, weighted=weighted)


def tree(vertex_count: int, edges: Iterable[EdgeInput]) -> Graph:
    """
    Builds an unweighted tree. Connectedness and acyclicity are assumed;
    use `graphs.trees.is_tree` to check them.
    """
    return _build(vertex_count, edges, directed=False, weighted=False)


# =============================================================================
# Validation
# =============================================================================


def is_valid_vertex(graph: Graph, vertex: Vertex) -> bool:
    return 0 <= vertex < graph.vertex_count


def require_undirected(graph: Graph, operation: str) -> None:
    if graph.directed:
        raise ValueError(f"{operation} is only defined for undirected graphs")


def require_directed(graph: Graph, operation: str) -> None:
    if not graph.directed:
        raise ValueError(f"{operation} is only defined for directed graphs")


# =============================================================================
# Algebra
# =============================================================================


def _check_compatible(first: Graph, second: Graph, operator: str) -> None:
    if first.directed != second.directed:
        raise ValueError(f"Cannot apply '{operator}' to a directed and an undirected graph")
    if first.vertex_count != second.vertex_count:
        raise ValueError(
            f"Cannot apply '{operator}' to graphs of {first.vertex_count} "
            f"and {second.vertex_count} vertices"
        )


def _from_adjacency(
    adjacency: list[AdjacencyList], directed: bool, weighted: bool
) -> Graph:
    entries = sum(len(neighbors) for neighbors in adjacency)
    return Graph(
        vertex_count=len(adjacency),
        edge_count=entries if directed else entries // 2,
        adjacency=tuple(adjacency),
        directed=directed,
        weighted=weighted,
    )


def graph_union(first: Graph, second: Graph) -> Graph:
    """
    Per-vertex union of the adjacency entries of two graphs.

    Keeps the entries of `first` in order, then appends every entry of `second`
    that `first` does not already hold at that vertex (counted as a multiset, so
    parallel edges and self-loops keep their multiplicity).

    Raises:
        ValueError: If the graphs differ in directedness or vertex count.
    """
    _check_compatible(first, second, "+")

    adjacency: list[AdjacencyList] = []
    for own, others in zip(first.adjacency, second.adjacency):
        available = Counter(own)
        merged = list(own)
        for entry in others:
            if available[entry]:
                available[entry] -= 1
            else:
                merged.append(entry)
        adjacency.append(tuple(merged))

    return _from_adjacency(adjacency, first.directed, first.weighted or second.weighted)


def graph_difference(first: Graph, second: Graph) -> Graph:
    """
    Entries of `first` that `second` does not hold at the same vertex.

    Raises:
        ValueError: If the graphs differ in directedness or vertex count.
    """
    _check_compatible(first, second, "-")

    adjacency: list[AdjacencyList] = []
    for own, others in zip(first.adjacency, second.adjacency):
        removable = Counter(others)
        kept: list[Neighbor] = []
        for entry in own:
            if removable[entry]:
                removable[entry] -= 1
            else:
                kept.append(entry)
        adjacency.append(tuple(kept))

    return _from_adjacency(adjacency, first.directed, first.weighted)


def graphs_equal(first: Graph, second: Graph) -> bool:
    """Same kind and size, and the same entries at every vertex in any order."""
    if (
        first.directed != second.directed
        or first.weighted != second.weighted
        or first.vertex_count != second.vertex_count
        or first.edge_count != second.edge_count
    ):
        return False

    return all(
        Counter(own) == Counter(others)
        for own, others in zip(first.adjacency, second.adjacency)
    )


__all__ = [
    "Graph",
    "directed_graph",
    "graph_difference",
    "graph_union",
    "graphs_equal",
    "is_valid_vertex",
    "require_directed",
    "require_undirected",
    "tree",
    "undirected_graph",
]
