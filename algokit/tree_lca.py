"""Lowest common ancestors in a rooted tree by binary lifting."""

from typing import Iterable, Optional


class AncestorTable:
    """Answers lowest-common-ancestor queries on a tree over nodes ``0..node_count - 1``."""

    def __init__(
        self, node_count: int, edges: Iterable[tuple[int, int]], root: int = 0
    ) -> None:
        if node_count < 1:
            raise ValueError("the tree must have at least one node")
        self.node_count = node_count
        self._check(root)
        adjacency: list[list[int]] = [[] for _ in range(node_count)]
        for u, v in edges:
            self._check(u)
            self._check(v)
            adjacency[u].append(v)
            adjacency[v].append(u)

        depth: list[Optional[int]] = [None] * node_count
        parent = [-1] * node_count
        depth[root] = 0
        stack = [root]
        while stack:
            cur = stack.pop()
            for child in adjacency[cur]:
                if depth[child] is None:
                    depth[child] = depth[cur] + 1
                    parent[child] = cur
                    stack.append(child)
        if any(d is None for d in depth):
            raise ValueError("the edges do not connect every node to the root")
        self._depth: list[int] = [d for d in depth if d is not None]

        self._up = [parent]
        for _ in range(1, max(1, node_count.bit_length())):
            below = self._up[-1]
            self._up.append([-1 if p == -1 else below[p] for p in below])

    def _check(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise ValueError(f"node {node} is outside 0..{self.node_count - 1}")

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._depth[u] > self._depth[v]:
            u, v = v, u
        gap = self._depth[v] - self._depth[u]
        level = 0
        while gap:
            if gap & 1:
                v = self._up[level][v]
            gap >>= 1
            level += 1
        if u == v:
            return u
        for jumps in reversed(self._up):
            if jumps[u] != jumps[v]:
                u, v = jumps[u], jumps[v]
        return self._up[0][u]