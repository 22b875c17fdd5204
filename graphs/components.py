"""
Connectivity and ordering.

Functions:
    connected_components(graph)  - Partition of an undirected graph's vertices
    is_connected(graph)          - Single component check (undirected)
    is_strongly_connected(graph) - Every vertex reaches every vertex (directed)
    topological_sort(graph)      - DFS postorder, reversed (directed)
"""

from graphs.constants import UNREACHABLE
from graphs.core import Graph, require_directed, require_undirected
from graphs.distance import road_distance
from graphs.traversal import depth_first_search
from graphs.types import Components, Vertex, Vertices


def connected_components(graph: Graph) -> Components:
    """
    Extract connected components from an undirected graph.

    Runs a depth-first search from each vertex no earlier search reached, so
    components come ordered by their lowest vertex and each lists its vertices
    in DFS preorder.

    Returns:
        Components partitioning [0, vertex_count).
    """
    require_undirected(graph, "connected_components")

    seen = [False] * graph.vertex_count
    components: list[Vertices] = []

    for vertex in range(graph.vertex_count):
        # Avoid visiting an already seen component
        if seen[vertex]:
            continue

        component = depth_first_search(graph, vertex)
        for member in component:
            seen[member] = True
        components.append(component)

    return tuple(components)


def is_connected(graph: Graph) -> bool:
    """True for graphs of at most one vertex, else iff a search from 0 reaches all."""
    require_undirected(graph, "is_connected")
    if graph.vertex_count <= 1:
        return True
    return len(depth_first_search(graph, 0)) == graph.vertex_count


def is_strongly_connected(graph: Graph) -> bool:
    """
    Every vertex reaches every other vertex.

    Runs one distance computation per vertex, O(V² + VE).
    """
    require_directed(graph, "is_strongly_connected")
    return all(
        UNREACHABLE not in road_distance(graph, vertex)
        for vertex in range(graph.vertex_count)
    )


def topological_sort(graph: Graph) -> Vertices:
    """
    Returns vertices so that every edge points forward.

    Each unvisited vertex starts a depth-first search that explores its
    out-neighbors in adjacency order; a vertex is recorded once all of them are
    finished, and the recorded order is reversed at the end.

    The graph must be acyclic. Cycles are not detected: a cyclic graph still
    gets an order, but some edge will point backwards in it.
    """
    require_directed(graph, "topological_sort")

    visited = [False] * graph.vertex_count
    finished: list[Vertex] = []

    for root in range(graph.vertex_count):
        if visited[root]:
            continue

        visited[root] = True
        stack: list[tuple[Vertex, int]] = [(root, 0)]
        while stack:
            current, position = stack[-1]
            neighbors = graph.adjacency[current]
            while position < len(neighbors) and visited[neighbors[position].vertex]:
                position += 1

            if position == len(neighbors):
                stack.pop()
                finished.append(current)
                continue

            following = neighbors[position].vertex
            stack[-1] = (current, position + 1)
            visited[following] = True
            stack.append((following, 0))

    return tuple(reversed(finished))


__all__ = [
    "connected_components",
    "is_connected",
    "is_strongly_connected",
    "topological_sort",
]
