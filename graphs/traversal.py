"""
Graph traversals.

Traversals:
    breadth_first_preorder(graph, start) - BFS yielding vertices as discovered
    depth_first_preorder(graph, start)   - DFS yielding vertices as discovered
    breadth_first_search(graph, start)   - Tuple form of the BFS order
    depth_first_search(graph, start)     - Tuple form of the DFS order

Neighbors are explored in adjacency-list order, so the result is fully
determined by the order the edges were given in. An invalid start vertex yields
nothing. On an undirected graph both searches return exactly the connected
component of the start vertex.
"""

from collections import deque
from collections.abc import Iterator

from graphs.core import Graph, is_valid_vertex
from graphs.types import Vertex, Vertices


def breadth_first_preorder(graph: Graph, start: Vertex) -> Iterator[Vertex]:
    """Yields vertices level by level, start first."""
    if not is_valid_vertex(graph, start):
        return

    visited = [False] * graph.vertex_count
    visited[start] = True
    queue = deque([start])
    yield start

    while queue:
        current = queue.popleft()
        for neighbor, _ in graph.adjacency[current]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
                yield neighbor


def depth_first_preorder(graph: Graph, start: Vertex) -> Iterator[Vertex]:
    """
    Yields vertices in depth-first discovery order.

    The top of the stack always descends into its first unvisited neighbor; a
    vertex leaves the stack once all its neighbors are visited.
    """
    if not is_valid_vertex(graph, start):
        return

    visited = [False] * graph.vertex_count
    visited[start] = True
    # Each frame remembers how far its adjacency list has been scanned
    stack: list[tuple[Vertex, int]] = [(start, 0)]
    yield start

    while stack:
        current, position = stack[-1]
        neighbors = graph.adjacency[current]
        while position < len(neighbors) and visited[neighbors[position].vertex]:
            position += 1

        if position == len(neighbors):
            stack.pop()
            continue

        following = neighbors[position].vertex
        stack[-1] = (current, position + 1)
        visited[following] = True
        stack.append((following, 0))
        yield following


def breadth_first_search(graph: Graph, start: Vertex) -> Vertices:
    return tuple(breadth_first_preorder(graph, start))


def depth_first_search(graph: Graph, start: Vertex) -> Vertices:
    return tuple(depth_first_preorder(graph, start))


__all__ = [
    "breadth_first_preorder",
    "breadth_first_search",
    "depth_first_preorder",
    "depth_first_search",
]
