"""
Road distances and reachability.

road_distance picks the algorithm from the graph kind:
- unweighted graphs: BFS layer distance (edge count);
- weighted graphs: Dijkstra relaxation with a lazy-deletion heap. A vertex may
  be pushed several times; stale entries are skipped once it is settled, and a
  settled vertex is never relaxed again.

Distances are UNREACHABLE (-1) for vertices the start cannot reach. Negative
weights are not supported input: the result is then meaningless.
"""

import heapq
from collections import deque
from typing import TypeAlias

import numpy as np

from graphs.constants import UNREACHABLE
from graphs.core import Graph, is_valid_vertex
from graphs.types import Vertex, Weight

Distances: TypeAlias = tuple[int, ...]


def layer_distance(graph: Graph, start: Vertex) -> Distances:
    """Number of edges on a shortest path from start, ignoring weights."""
    if not is_valid_vertex(graph, start):
        return ()

    distance = [UNREACHABLE] * graph.vertex_count
    distance[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor, _ in graph.adjacency[current]:
            if distance[neighbor] == UNREACHABLE:
                distance[neighbor] = distance[current] + 1
                queue.append(neighbor)

    return tuple(distance)


def weighted_distance(graph: Graph, start: Vertex) -> Distances:
    """Total weight of a lightest path from start (Dijkstra)."""
    if not is_valid_vertex(graph, start):
        return ()

    distance = [UNREACHABLE] * graph.vertex_count
    settled = [False] * graph.vertex_count
    distance[start] = 0
    heap: list[tuple[Weight, Vertex]] = [(0, start)]

    while heap:
        _, current = heapq.heappop(heap)
        if settled[current]:
            continue
        settled[current] = True

        for neighbor, weight in graph.adjacency[current]:
            if settled[neighbor]:
                continue
            candidate = distance[current] + weight
            if distance[neighbor] == UNREACHABLE or candidate < distance[neighbor]:
                distance[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))

    return tuple(distance)


def road_distance(graph: Graph, start: Vertex) -> Distances:
    """
    Distance from start to every vertex.

    Args:
        graph: Any graph.
        start: Source vertex.

    Returns:
        A tuple of length vertex_count with 0 at start and UNREACHABLE at
        vertices with no path from start, or an empty tuple when start is not
        a vertex of the graph.
    """
    if graph.weighted:
        return weighted_distance(graph, start)
    return layer_distance(graph, start)


def road_matrix(graph: Graph) -> np.ndarray:
    """
    Reachability matrix: entry [i, j] is True iff j can be reached from i.

    Every vertex reaches itself, so the diagonal is True.
    """
    matrix = np.zeros((graph.vertex_count, graph.vertex_count), dtype=bool)
    for vertex in range(graph.vertex_count):
        matrix[vertex] = np.array(road_distance(graph, vertex)) != UNREACHABLE
    return matrix


__all__ = [
    "Distances",
    "layer_distance",
    "road_distance",
    "road_matrix",
    "weighted_distance",
]
