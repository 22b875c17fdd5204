"""
Classical graph algorithms over static adjacency-list graphs.

**Graphs** (core.py, types.py)
    One immutable `Graph` value for directed/undirected, weighted/unweighted
    graphs, built once from an edge list.
    - undirected_graph, directed_graph, tree
    - a + b, a - b, a == b

**Degrees** (degree.py)
    - degree, in_degree, out_degree, min/max variants, density

**Traversal and distance** (traversal.py, distance.py)
    - breadth_first_search, depth_first_search
    - road_distance (BFS layers or Dijkstra), road_matrix

**Structure** (components.py, lowlink.py, properties.py)
    - connected_components, is_connected, is_strongly_connected, topological_sort
    - articulation_points, is_biconnected, biconnected_components,
      strongly_connected_components
    - is_complete, is_regular, is_hamiltonian, is_eulerian, is_bipartite

**Spanning trees** (spanning.py, union_find.py)
    - edges_vector, minimum_spanning_tree (Kruskal over DisjointSet)

**Trees** (trees.py)
    - is_tree, diameter, radius, center

**Input/output** (io.py, cli.py)
    - parse_graph, read_graph, format_adjacency
"""

from .components import (
    connected_components,
    is_connected,
    is_strongly_connected,
    topological_sort,
)
from .core import (
    Graph,
    directed_graph,
    graph_difference,
    graph_union,
    graphs_equal,
    is_valid_vertex,
    tree,
    undirected_graph,
)
from .degree import (
    degree,
    density,
    in_degree,
    max_degree,
    max_in_degree,
    max_out_degree,
    min_degree,
    min_in_degree,
    min_out_degree,
    out_degree,
)
from .distance import road_distance, road_matrix
from .io import GraphFormatError, format_adjacency, parse_graph, read_graph
from .lowlink import (
    articulation_points,
    biconnected_components,
    is_biconnected,
    strongly_connected_components,
)
from .properties import (
    is_bipartite,
    is_complete,
    is_eulerian,
    is_hamiltonian,
    is_regular,
)
from .spanning import edges_vector, minimum_spanning_tree
from .traversal import breadth_first_search, depth_first_search
from .trees import center, diameter, is_tree, radius
from .types import Edge, Neighbor, SpanningTree, Vertex, Weight
from .union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "Edge",
    "Graph",
    "GraphFormatError",
    "Neighbor",
    "SpanningTree",
    "Vertex",
    "Weight",
    "articulation_points",
    "biconnected_components",
    "breadth_first_search",
    "center",
    "connected_components",
    "degree",
    "density",
    "depth_first_search",
    "diameter",
    "directed_graph",
    "edges_vector",
    "format_adjacency",
    "graph_difference",
    "graph_union",
    "graphs_equal",
    "in_degree",
    "is_biconnected",
    "is_bipartite",
    "is_complete",
    "is_connected",
    "is_eulerian",
    "is_hamiltonian",
    "is_regular",
    "is_strongly_connected",
    "is_tree",
    "is_valid_vertex",
    "max_degree",
    "max_in_degree",
    "max_out_degree",
    "min_degree",
    "min_in_degree",
    "min_out_degree",
    "minimum_spanning_tree",
    "out_degree",
    "parse_graph",
    "radius",
    "read_graph",
    "road_distance",
    "road_matrix",
    "strongly_connected_components",
    "topological_sort",
    "tree",
    "undirected_graph",
]
