"""
Disjoint Set (Union-Find) over vertex indices.

Tracks a partition of the vertices 0 .. size - 1:
- find_root(v): Representative of the set containing v - O(α(n)) amortized
- link(a, b): Merge the sets whose roots are a and b - O(1)
- union_sets(a, b): Merge the sets containing a and b - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Used by Kruskal's minimum spanning tree to tell whether an edge joins two
different trees of the forest built so far.
"""

from graphs.types import Vertex


class DisjointSet:
    """
    Union-Find with path compression and union by rank.

    Every vertex starts as the root of its own singleton set.

    Example:
        >>> sets = DisjointSet(4)
        >>> sets.link(0, 1)
        >>> sets.union_sets(2, 0)
        >>> sets.find_root(2) == sets.find_root(0)
        True
        >>> sets.find_root(3) == sets.find_root(0)
        False
    """

    def __init__(self, size: int) -> None:
        self._parent: list[Vertex] = list(range(size))
        self._rank: list[int] = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def parent(self, vertex: Vertex) -> Vertex:
        return self._parent[vertex]

    def rank(self, vertex: Vertex) -> int:
        return self._rank[vertex]

    def link(self, first_root: Vertex, second_root: Vertex) -> None:
        """
        Attaches the lower-rank root under the higher-rank one.

        On equal ranks `first_root` goes under `second_root`, whose rank grows
        by one. Both arguments must already be roots: no lookup happens here.
        """
        if first_root == second_root:
            return

        if self._rank[first_root] < self._rank[second_root]:
            self._parent[first_root] = second_root
        elif self._rank[first_root] > self._rank[second_root]:
            self._parent[second_root] = first_root
        else:
            self._parent[first_root] = second_root
            self._rank[second_root] += 1

    def find_root(self, vertex: Vertex) -> Vertex:
        """
        Finds the representative (root) of the set containing vertex.

        Uses path compression: every vertex on the walked path is repointed
        directly to the root. Each repointing lowers the root's rank by one
        (never below 0).
        """
        root = vertex
        while self._parent[root] != root:
            root = self._parent[root]

        current = vertex
        while self._parent[current] != root:
            following = self._parent[current]
            self._parent[current] = root
            self._rank[root] = max(self._rank[root] - 1, 0)
            current = following

        return root

    def union_sets(self, first: Vertex, second: Vertex) -> None:
        """Merges the sets containing first and second."""
        self.link(self.find_root(first), self.find_root(second))


__all__ = ["DisjointSet"]
