"""Disjoint-set union with path compression and union by size."""


class DisjointSet:
    """Disjoint sets over the nodes ``0..n``, counting components among ``1..n``.

    Node 0 exists so that 1-based node numbers can be used directly. It is
    not counted as a component.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of nodes must not be negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._components = n

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside 0..{len(self._parent) - 1}")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> None:
        """Merge the sets holding ``u`` and ``v``; the smaller joins the larger."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] > self._size[root_v]:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        else:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        self._components -= 1

    def component_count(self) -> int:
        """Return the number of components among the nodes ``1..n``."""
        return self._components