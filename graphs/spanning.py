"""
Edge lists and Kruskal's minimum spanning tree (undirected graphs).
"""

import logging

from graphs.core import Graph, require_undirected
from graphs.types import Edge, SpanningTree
from graphs.union_find import DisjointSet

logger = logging.getLogger(__name__)


def edges_vector(graph: Graph) -> tuple[Edge, ...]:
    """
    One (source, destination, weight) triple per undirected edge.

    Vertices are scanned in increasing order, so the first orientation met is
    the one with source <= destination. Parallel edges stay separate; a
    self-loop, stored twice in its vertex's list, is reported once.
    """
    require_undirected(graph, "edges_vector")

    edges: list[Edge] = []
    for source, neighbors in enumerate(graph.adjacency):
        loops = 0
        for destination, weight in neighbors:
            if destination == source:
                # Both entries of a self-loop live in this list
                if loops % 2 == 0:
                    edges.append(Edge(source, destination, weight))
                loops += 1
            elif destination > source:
                edges.append(Edge(source, destination, weight))
    return tuple(edges)


def minimum_spanning_tree(graph: Graph) -> SpanningTree:
    """
    Kruskal's algorithm.

    Edges are considered by ascending weight (ties keep edges_vector order)
    and kept whenever they join two different trees of the forest so far.

    Returns:
        The selected edges and their total weight. A disconnected graph gets a
        spanning forest: V minus the number of components edges.
    """
    require_undirected(graph, "minimum_spanning_tree")

    candidates = sorted(edges_vector(graph), key=lambda edge: edge.weight)
    forest = DisjointSet(graph.vertex_count)
    selected: list[Edge] = []
    cost = 0

    for edge in candidates:
        if forest.find_root(edge.source) == forest.find_root(edge.destination):
            continue

        forest.union_sets(edge.source, edge.destination)
        selected.append(edge)
        cost += edge.weight
        if len(selected) == graph.vertex_count - 1:
            break

    logger.debug(f"Spanning tree: {len(selected)} edges, cost {cost}")
    return SpanningTree(edges=tuple(selected), cost=cost)


__all__ = ["edges_vector", "minimum_spanning_tree"]
