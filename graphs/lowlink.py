"""
Low-link depth-first searches.

Functions:
    articulation_points(graph)           - Cut vertices (undirected)
    is_biconnected(graph)                - Connected, no cut vertex (undirected)
    biconnected_components(graph)        - Blocks of an undirected graph
    strongly_connected_components(graph) - Tarjan's SCCs (directed)

Every search gives each vertex a discovery time and a low value: the smallest
discovery time reachable from the vertex's DFS subtree through one back edge.
A vertex goes unvisited -> active (its frame is on the DFS stack) -> finished
(its frame was popped) and is never entered again.

The searches are iterative: each frame holds a vertex and how far its adjacency
list has been scanned, and the work a recursive version does after a child call
returns happens when the child's frame is popped. The discovery clock and all
per-vertex arrays live in a `LowLinkState` created per call, so repeated calls
on the same graph always agree.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from graphs.core import Graph, require_directed, require_undirected
from graphs.types import Components, Vertex, Vertices

logger = logging.getLogger(__name__)

NO_PARENT = -1


@dataclass
class LowLinkState:
    """
    Scratch state of one low-link search.

    Attributes:
        discovery: Discovery time per vertex, 0 while unvisited.
        low: Low value per vertex.
        parent: DFS-tree parent per vertex, NO_PARENT for roots.
        clock: Last discovery time handed out.
    """

    discovery: list[int]
    low: list[int]
    parent: list[Vertex]
    clock: int = 0

    @classmethod
    def for_graph(cls, graph: Graph) -> "LowLinkState":
        return cls(
            discovery=[0] * graph.vertex_count,
            low=[0] * graph.vertex_count,
            parent=[NO_PARENT] * graph.vertex_count,
        )

    def visited(self, vertex: Vertex) -> bool:
        return self.discovery[vertex] != 0

    def discover(self, vertex: Vertex, parent: Vertex = NO_PARENT) -> None:
        self.clock += 1
        self.discovery[vertex] = self.low[vertex] = self.clock
        self.parent[vertex] = parent

    def absorb(self, vertex: Vertex, value: int) -> None:
        """Lowers the low value of vertex to value if it is smaller."""
        if value < self.low[vertex]:
            self.low[vertex] = value


@dataclass
class _Frame:
    vertex: Vertex
    position: int = 0
    children: int = 0


# =============================================================================
# Undirected: articulation points and biconnected components
# =============================================================================


def _articulation_walk(graph: Graph, root: Vertex, state: LowLinkState) -> Iterator[Vertex]:
    """
    Depth-first search from root yielding cut vertices as they are detected.

    A non-root vertex is yielded once per child whose low value does not go
    above its discovery time; the root once per child after its first.
    """
    state.discover(root)
    stack = [_Frame(root)]

    while stack:
        frame = stack[-1]
        vertex = frame.vertex
        neighbors = graph.adjacency[vertex]

        if frame.position < len(neighbors):
            neighbor = neighbors[frame.position].vertex
            frame.position += 1
            if not state.visited(neighbor):
                frame.children += 1
                state.discover(neighbor, parent=vertex)
                stack.append(_Frame(neighbor))
            elif neighbor != state.parent[vertex]:
                state.absorb(vertex, state.discovery[neighbor])
            continue

        stack.pop()
        if not stack:
            break

        parent_frame = stack[-1]
        parent = parent_frame.vertex
        state.absorb(parent, state.low[vertex])
        if parent == root:
            if parent_frame.children > 1:
                yield parent
        elif state.low[vertex] >= state.discovery[parent]:
            yield parent


def articulation_points(graph: Graph) -> Vertices:
    """
    Vertices whose removal disconnects their component.

    Returns:
        Each cut vertex once, in the order the search first detects it.
    """
    require_undirected(graph, "articulation_points")

    state = LowLinkState.for_graph(graph)
    found: dict[Vertex, None] = {}
    for root in range(graph.vertex_count):
        if state.visited(root):
            continue
        for vertex in _articulation_walk(graph, root, state):
            found.setdefault(vertex)

    return tuple(found)


def is_biconnected(graph: Graph) -> bool:
    """
    Connected and free of cut vertices.

    A single search from vertex 0 stops at the first cut vertex it meets.
    Graphs with no vertices or no edges are not biconnected.
    """
    require_undirected(graph, "is_biconnected")
    if graph.vertex_count == 0 or graph.edge_count == 0:
        return False

    state = LowLinkState.for_graph(graph)
    if next(_articulation_walk(graph, 0, state), None) is not None:
        return False

    return all(state.visited(vertex) for vertex in range(graph.vertex_count))


def biconnected_components(graph: Graph) -> Components:
    """
    Maximal vertex sets with no cut vertex of their own.

    Vertices are pushed on a stack when discovered. When a child's low value
    does not go above its parent's depth, the stack is popped down to and
    including the child, and the parent is added: that group is one component.
    Isolated vertices belong to no component.

    Returns:
        Components in the order they are completed; each lists the popped
        vertices from the top of the stack down, then the parent.
    """
    require_undirected(graph, "biconnected_components")

    state = LowLinkState.for_graph(graph)
    components: list[Vertices] = []

    for root in range(graph.vertex_count):
        if state.visited(root):
            continue

        state.discover(root)
        pending: list[Vertex] = [root]
        stack = [_Frame(root)]

        while stack:
            frame = stack[-1]
            vertex = frame.vertex
            neighbors = graph.adjacency[vertex]

            if frame.position < len(neighbors):
                neighbor = neighbors[frame.position].vertex
                frame.position += 1
                if not state.visited(neighbor):
                    state.discover(neighbor, parent=vertex)
                    pending.append(neighbor)
                    stack.append(_Frame(neighbor))
                elif neighbor != state.parent[vertex]:
                    state.absorb(vertex, state.discovery[neighbor])
                continue

            stack.pop()
            if not stack:
                break

            parent = stack[-1].vertex
            state.absorb(parent, state.low[vertex])
            if state.low[vertex] >= state.discovery[parent]:
                component: list[Vertex] = []
                while True:
                    member = pending.pop()
                    component.append(member)
                    if member == vertex:
                        break
                component.append(parent)
                logger.debug(f"Biconnected component: {component}")
                components.append(tuple(component))

    return tuple(components)


# =============================================================================
# Directed: strongly connected components
# =============================================================================


def strongly_connected_components(graph: Graph) -> Components:
    """
    Tarjan's strongly connected components.

    Discovered vertices go on a stack and stay there until their component is
    complete. Only vertices still on the stack lower a low value: an edge into
    an already completed component is not a way back. When a vertex finishes
    with low == discovery it roots a component, popped down to and including
    it.

    Returns:
        Components in completion order (a reverse topological order of the
        condensation); each lists its vertices in pop order.
    """
    require_directed(graph, "strongly_connected_components")

    state = LowLinkState.for_graph(graph)
    on_stack = [False] * graph.vertex_count
    pending: list[Vertex] = []
    components: list[Vertices] = []

    for root in range(graph.vertex_count):
        if state.visited(root):
            continue

        state.discover(root)
        pending.append(root)
        on_stack[root] = True
        stack = [_Frame(root)]

        while stack:
            frame = stack[-1]
            vertex = frame.vertex
            neighbors = graph.adjacency[vertex]

            if frame.position < len(neighbors):
                neighbor = neighbors[frame.position].vertex
                frame.position += 1
                if not state.visited(neighbor):
                    state.discover(neighbor, parent=vertex)
                    pending.append(neighbor)
                    on_stack[neighbor] = True
                    stack.append(_Frame(neighbor))
                elif on_stack[neighbor]:
                    state.absorb(vertex, state.discovery[neighbor])
                continue

            stack.pop()
            if state.low[vertex] == state.discovery[vertex]:
                component: list[Vertex] = []
                while True:
                    member = pending.pop()
                    on_stack[member] = False
                    component.append(member)
                    if member == vertex:
                        break
                logger.debug(f"Strongly connected component: {component}")
                components.append(tuple(component))

            if stack:
                state.absorb(stack[-1].vertex, state.low[vertex])

    return tuple(components)


__all__ = [
    "LowLinkState",
    "articulation_points",
    "biconnected_components",
    "is_biconnected",
    "strongly_connected_components",
]
