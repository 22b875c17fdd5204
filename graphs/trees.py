"""
Tree measures.

Functions:
    is_tree(graph)  - Undirected, connected, V - 1 edges
    diameter(graph) - Vertices on a longest path (double BFS)
    radius(graph)   - Smallest eccentricity, in edges
    center(graph)   - Middle vertex or vertices of a longest path

Both ends of a longest path come from breadth-first searches: on a tree, the
last vertex a BFS discovers from any start is an end of some longest path, and
the last one discovered from that end is the other end.

diameter, radius and center assume their argument is a tree; on other graphs
the results are meaningless.
"""

from graphs.components import is_connected
from graphs.constants import DEFAULT_START
from graphs.core import Graph, require_undirected
from graphs.distance import layer_distance
from graphs.traversal import breadth_first_search
from graphs.types import Vertex, Vertices


def is_tree(graph: Graph) -> bool:
    if graph.directed:
        return False
    return graph.edge_count == graph.vertex_count - 1 and is_connected(graph)


def _farthest(graph: Graph, start: Vertex) -> Vertex:
    """Last vertex discovered by a breadth-first search from start."""
    return breadth_first_search(graph, start)[-1]


def diameter(graph: Graph) -> int:
    """
    Number of vertices on a longest path, i.e. its edge count plus one.

    Returns:
        0 for an empty tree, 1 for a single vertex.
    """
    require_undirected(graph, "diameter")
    if graph.vertex_count == 0:
        return 0

    first_leaf = _farthest(graph, DEFAULT_START)
    return max(layer_distance(graph, first_leaf)) + 1


def radius(graph: Graph) -> int:
    """Eccentricity of the center, counted in edges."""
    return diameter(graph) // 2


def _path(graph: Graph, source: Vertex, target: Vertex) -> list[Vertex]:
    """
    Depth-first search from source keeping the current path on a stack.

    Returns:
        The stack once target is on top: the path from source to target.
    """
    visited = [False] * graph.vertex_count
    visited[source] = True
    stack = [source]

    while stack:
        current = stack[-1]
        if current == target:
            return stack

        following = next(
            (neighbor for neighbor, _ in graph.adjacency[current] if not visited[neighbor]),
            None,
        )
        if following is None:
            stack.pop()
        else:
            visited[following] = True
            stack.append(following)

    return []


def center(graph: Graph) -> Vertices:
    """
    Middle of a longest path.

    Returns:
        One vertex when the longest path has an odd number of vertices, two
        adjacent vertices (ascending) when it has an even number, and nothing
        for an empty tree.
    """
    require_undirected(graph, "center")
    if graph.vertex_count == 0:
        return ()

    first_leaf = _farthest(graph, DEFAULT_START)
    second_leaf = _farthest(graph, first_leaf)
    path = _path(graph, first_leaf, second_leaf)

    middle = len(path) // 2
    if len(path) % 2:
        return (path[middle],)
    return tuple(sorted((path[middle - 1], path[middle])))


__all__ = ["center", "diameter", "is_tree", "radius"]
