"""Unweighted graphs: traversal, cycles, components and cut structure."""

from collections import deque
from typing import Optional


class Graph:
    """A graph on nodes ``0..node_count - 1`` stored as adjacency lists."""

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("the number of nodes must not be negative")
        self.node_count = node_count
        self._adjacency: list[list[int]] = [[] for _ in range(node_count)]

    def _check(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise ValueError(f"node {node} is outside 0..{self.node_count - 1}")

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back unless ``directed``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if not directed:
            self._adjacency[v].append(u)

    def dfs(self, start: int) -> list[int]:
        """Return the nodes reachable from ``start`` in depth-first preorder."""
        self._check(start)
        visited = [False] * self.node_count
        order: list[int] = []

        def visit(node: int) -> None:
            visited[node] = True
            order.append(node)
            for neigh in self._adjacency[node]:
                if not visited[neigh]:
                    visit(neigh)

        visit(start)
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the nodes reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * self.node_count
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for child in self._adjacency[node]:
                if not visited[child]:
                    visited[child] = True
                    queue.append(child)
        return order

    def has_cycle(self) -> bool:
        """Return whether the graph, read as directed, contains a cycle."""
        visited = [False] * self.node_count
        on_path = [False] * self.node_count

        def explore(node: int) -> bool:
            visited[node] = on_path[node] = True
            for neigh in self._adjacency[node]:
                if on_path[neigh]:
                    return True
                if not visited[neigh] and explore(neigh):
                    return True
            on_path[node] = False
            return False

        return any(
            explore(node) for node in range(self.node_count) if not visited[node]
        )

    def strongly_connected_components(self) -> list[list[int]]:
        """Return the strongly connected components (Kosaraju).

        Each component lists its nodes in the order the second pass
        finishes them.
        """
        visited = [False] * self.node_count
        finished: list[int] = []

        def forward(node: int) -> None:
            visited[node] = True
            for neigh in self._adjacency[node]:
                if not visited[neigh]:
                    forward(neigh)
            finished.append(node)

        for node in range(self.node_count):
            if not visited[node]:
                forward(node)

        reverse: list[list[int]] = [[] for _ in range(self.node_count)]
        for node, neighbours in enumerate(self._adjacency):
            for neigh in neighbours:
                reverse[neigh].append(node)

        visited = [False] * self.node_count

        def backward(node: int, component: list[int]) -> None:
            visited[node] = True
            for neigh in reverse[node]:
                if not visited[neigh]:
                    backward(neigh, component)
            component.append(node)

        components: list[list[int]] = []
        for node in reversed(finished):
            if not visited[node]:
                component: list[int] = []
                backward(node, component)
                components.append(component)
        return components

    def shortest_cycle(self) -> Optional[int]:
        """Return the length of the shortest cycle of an undirected graph, or None."""
        none_found = self.node_count + 1
        best = none_found
        for source in range(self.node_count):
            distance: list[Optional[int]] = [None] * self.node_count
            distance[source] = 0
            queue = deque([source])
            while queue:
                cur = queue.popleft()
                for neigh in self._adjacency[cur]:
                    if distance[neigh] is None:
                        distance[neigh] = distance[cur] + 1
                        queue.append(neigh)
                    elif distance[neigh] >= distance[cur]:
                        best = min(best, distance[neigh] + distance[cur] + 1)
        return None if best == none_found else best

    def topological_sort_bfs(self) -> list[int]:
        """Return a topological order by repeatedly taking nodes of in-degree 0.

        Nodes on or behind a cycle never reach in-degree 0 and are left out.
        """
        indegree = [0] * self.node_count
        for neighbours in self._adjacency:
            for node in neighbours:
                indegree[node] += 1
        queue = deque(node for node in range(self.node_count) if indegree[node] == 0)
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for child in self._adjacency[node]:
                indegree[child] -= 1
                if indegree[child] == 0:
                    queue.append(child)
        return order

    def topological_sort_dfs(self) -> list[int]:
        """Return a topological order by reversed depth-first finishing times."""
        visited = [False] * self.node_count
        finished: list[int] = []

        def visit(node: int) -> None:
            visited[node] = True
            for child in self._adjacency[node]:
                if not visited[child]:
                    visit(child)
            finished.append(node)

        for node in range(self.node_count):
            if not visited[node]:
                visit(node)
        return finished[::-1]

    def articulation_points(self) -> list[int]:
        """Return, in ascending order, the cut vertices reachable from node 0."""
        if self.node_count == 0:
            return []
        discovered = [0] * self.node_count
        low = [0] * self.node_count
        timer = 1
        points: set[int] = set()

        def explore(cur: int, parent: int) -> None:
            nonlocal timer
            discovered[cur] = low[cur] = timer
            timer += 1
            children = 0
            for neigh in self._adjacency[cur]:
                if neigh == parent:
                    continue
                if not discovered[neigh]:
                    explore(neigh, cur)
                    low[cur] = min(low[cur], low[neigh])
                    if discovered[cur] <= low[neigh] and parent != -1:
                        points.add(cur)
                    children += 1
                else:
                    low[cur] = min(low[cur], discovered[neigh])
            if children > 1 and parent == -1:
                points.add(cur)

        explore(0, -1)
        return sorted(points)

    def bridges(self) -> list[tuple[int, int]]:
        """Return the bridges reachable from node 0, in the order they are found.

        Each bridge is ``(u, v)`` with ``u`` the endpoint reached first.
        """
        if self.node_count == 0:
            return []
        discovered = [0] * self.node_count
        low = [0] * self.node_count
        timer = 1
        found: list[tuple[int, int]] = []

        def explore(cur: int, parent: int) -> None:
            nonlocal timer
            discovered[cur] = low[cur] = timer
            timer += 1
            for neigh in self._adjacency[cur]:
                if neigh == parent:
                    continue
                if not discovered[neigh]:
                    explore(neigh, cur)
                low[cur] = min(low[cur], low[neigh])
                if discovered[cur] < low[neigh]:
                    found.append((cur, neigh))

        explore(0, -1)
        return found