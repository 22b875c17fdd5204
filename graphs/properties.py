"""
Structural predicates.

is_complete and is_regular apply to both kinds of graphs with kind-specific
meaning; the others are defined for undirected graphs only.
"""

from collections import deque

from graphs.components import is_connected
from graphs.core import Graph, require_undirected
from graphs.degree import degree, in_degree, out_degree


def is_complete(graph: Graph) -> bool:
    """
    Every vertex is joined to every other vertex.

    Undirected graphs compare the edge count with V(V-1)/2, which assumes a
    simple graph. Directed graphs require each vertex to point directly to
    every other vertex.
    """
    vertices = graph.vertex_count
    if not graph.directed:
        return graph.edge_count == vertices * (vertices - 1) // 2

    for vertex, neighbors in enumerate(graph.adjacency):
        covered = {neighbor for neighbor, _ in neighbors}
        covered.add(vertex)
        if len(covered) < vertices:
            return False
    return True


def is_regular(graph: Graph) -> bool:
    """
    All vertices have the same degree.

    Directed graphs need uniform in-degrees and uniform out-degrees. Graphs
    with fewer than two vertices are regular.
    """
    if graph.directed:
        in_degrees = {in_degree(graph, vertex) for vertex in range(graph.vertex_count)}
        out_degrees = {out_degree(graph, vertex) for vertex in range(graph.vertex_count)}
        return len(in_degrees) <= 1 and len(out_degrees) <= 1

    degrees = {degree(graph, vertex) for vertex in range(graph.vertex_count)}
    return len(degrees) <= 1


def is_hamiltonian(graph: Graph) -> bool:
    """
    Dirac's sufficient condition for a Hamiltonian cycle.

    False below three vertices; true for complete graphs; otherwise true iff
    every vertex has degree at least V/2. A False answer does not prove the
    graph has no Hamiltonian cycle.
    """
    require_undirected(graph, "is_hamiltonian")
    vertices = graph.vertex_count
    if vertices < 3:
        return False
    if is_complete(graph):
        return True
    return all(2 * degree(graph, vertex) >= vertices for vertex in range(vertices))


def is_eulerian(graph: Graph) -> bool:
    """Connected with every degree even."""
    require_undirected(graph, "is_eulerian")
    if not is_connected(graph):
        return False
    return all(degree(graph, vertex) % 2 == 0 for vertex in range(graph.vertex_count))


def is_bipartite(graph: Graph) -> bool:
    """
    Two-colors the graph breadth first.

    Unlike a check that only colors the component of vertex 0, coloring
    restarts from every vertex still uncolored, so an odd cycle in any
    component makes the graph non-bipartite. Fails as soon as an edge joins two
    vertices of the same color (a self-loop always does). Graphs with no
    vertices or no edges are not bipartite.
    """
    require_undirected(graph, "is_bipartite")
    if graph.vertex_count == 0 or graph.edge_count == 0:
        return False

    color: list[int | None] = [None] * graph.vertex_count

    for start in range(graph.vertex_count):
        if color[start] is not None:
            continue

        color[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor, _ in graph.adjacency[current]:
                if color[neighbor] is None:
                    color[neighbor] = 1 - color[current]
                    queue.append(neighbor)
                elif color[neighbor] == color[current]:
                    return False

    return True


__all__ = [
    "is_bipartite",
    "is_complete",
    "is_eulerian",
    "is_hamiltonian",
    "is_regular",
]
