"""Weighted graphs: shortest paths and minimum spanning trees."""

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Optional

from algokit.disjoint_set import DisjointSet


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle leaves shortest paths undefined."""


@dataclass
class SpanningTree:
    """A spanning tree given by its total weight and its edges."""

    weight: int
    edges: list[tuple[int, int]]


class WeightedGraph:
    """A graph on nodes ``0..node_count - 1`` with integer edge weights."""

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("the number of nodes must not be negative")
        self.node_count = node_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(node_count)]
        self._arcs: list[tuple[int, int, int]] = []

    def _check(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise ValueError(f"node {node} is outside 0..{self.node_count - 1}")

    def add_edge(self, u: int, v: int, weight: int, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back unless ``directed``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        self._arcs.append((u, v, weight))
        if not directed:
            self._adjacency[v].append((u, weight))
            self._arcs.append((v, u, weight))

    def bellman_ford(self, source: int) -> list[Optional[int]]:
        """Return shortest distances from ``source``; ``None`` marks unreachable nodes.

        Negative edge weights are allowed. Raises NegativeCycleError when a
        negative cycle is reachable from ``source``.
        """
        self._check(source)
        distance: list[Optional[int]] = [None] * self.node_count
        distance[source] = 0
        for _ in range(self.node_count - 1):
            for u, v, weight in self._arcs:
                du = distance[u]
                if du is not None and (distance[v] is None or du + weight < distance[v]):
                    distance[v] = du + weight
        for u, v, weight in self._arcs:
            du = distance[u]
            if du is not None and (distance[v] is None or du + weight < distance[v]):
                raise NegativeCycleError("found a negative weight cycle")
        return distance

    def dijkstra(self, source: int) -> list[Optional[int]]:
        """Return shortest distances from ``source`` for non-negative weights.

        ``None`` marks nodes that cannot be reached.
        """
        self._check(source)
        distance: list[Optional[int]] = [None] * self.node_count
        distance[source] = 0
        queue = [(0, source)]
        while queue:
            so_far, node = heapq.heappop(queue)
            for neigh, weight in self._adjacency[node]:
                candidate = so_far + weight
                if distance[neigh] is None or candidate < distance[neigh]:
                    distance[neigh] = candidate
                    heapq.heappush(queue, (candidate, neigh))
        return distance

    def floyd_warshall(self) -> list[list[Optional[int]]]:
        """Return the matrix of shortest distances between every pair of nodes.

        ``None`` marks pairs with no path. Raises NegativeCycleError when the
        graph holds a negative cycle.
        """
        n = self.node_count
        dist: list[list[Optional[int]]] = [[None] * n for _ in range(n)]
        for u, v, weight in self._arcs:
            dist[u][v] = weight
        for i in range(n):
            dist[i][i] = 0
        for k in range(n):
            for i in range(n):
                through = dist[i][k]
                if through is None:
                    continue
                for j in range(n):
                    onward = dist[k][j]
                    if onward is None:
                        continue
                    candidate = through + onward
                    if dist[i][j] is None or candidate < dist[i][j]:
                        dist[i][j] = candidate
        if any(dist[i][i] < 0 for i in range(n)):
            raise NegativeCycleError("found a negative weight cycle")
        return dist

    def kruskal(self) -> SpanningTree:
        """Return a minimum spanning forest built by Kruskal's algorithm.

        Edges are taken in order of weight, then of endpoint numbers.
        """
        candidates = sorted(
            (weight, neigh, node)
            for node, neighbours in enumerate(self._adjacency)
            for neigh, weight in neighbours
        )
        sets = DisjointSet(self.node_count)
        total = 0
        edges: list[tuple[int, int]] = []
        for weight, u, v in candidates:
            if sets.find(u) != sets.find(v):
                total += weight
                edges.append((u, v))
                sets.union(u, v)
        return SpanningTree(total, edges)

    def prim(self, source: int) -> SpanningTree:
        """Return a minimum spanning tree of the nodes reachable from ``source``.

        Each edge is ``(node, parent)``, listed in the order nodes join the tree.
        """
        self._check(source)
        visited = [False] * self.node_count
        order = count()
        queue: list[tuple[int, int, int, int]] = [(0, next(order), source, -1)]
        total = 0
        edges: list[tuple[int, int]] = []
        while queue:
            weight, _, node, parent = heapq.heappop(queue)
            if visited[node]:
                continue
            visited[node] = True
            if parent != -1:
                edges.append((node, parent))
            total += weight
            for neigh, edge_weight in self._adjacency[node]:
                if not visited[neigh]:
                    heapq.heappush(queue, (edge_weight, next(order), neigh, node))
        return SpanningTree(total, edges)