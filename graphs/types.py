"""
Type definitions for the graph algorithms.

Vertices are dense integer indices in [0, vertex_count). Weights are signed
integers; unweighted graphs carry a weight of 0 on every edge.
"""

from collections.abc import Sequence
from typing import NamedTuple, TypeAlias

Vertex: TypeAlias = int
Weight: TypeAlias = int

# Vertex sequences returned by traversals and component extraction
Vertices: TypeAlias = tuple[Vertex, ...]
Components: TypeAlias = tuple[Vertices, ...]


class Neighbor(NamedTuple):
    """One adjacency entry: the vertex at the other end and the edge weight."""

    vertex: Vertex
    weight: Weight


AdjacencyList: TypeAlias = tuple[Neighbor, ...]
Adjacency: TypeAlias = tuple[AdjacencyList, ...]


class Edge(NamedTuple):
    source: Vertex
    destination: Vertex
    weight: Weight = 0


# Edge tuples accepted by the constructors: (u, v) or (u, v, w)
EdgeInput: TypeAlias = tuple[Vertex, Vertex] | tuple[Vertex, Vertex, Weight]
EdgeList: TypeAlias = Sequence[EdgeInput]


class SpanningTree(NamedTuple):
    """Edges selected by Kruskal's algorithm and their accumulated weight."""

    edges: tuple[Edge, ...]
    cost: Weight


__all__ = [
    "Adjacency",
    "AdjacencyList",
    "Components",
    "Edge",
    "EdgeInput",
    "EdgeList",
    "Neighbor",
    "SpanningTree",
    "Vertex",
    "Vertices",
    "Weight",
]
