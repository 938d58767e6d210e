"""A segment tree answering range-minimum queries with point updates."""

from typing import Sequence


class MinSegmentTree:
    """Range minimum over a fixed-length sequence, with point assignment."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("values must not be empty")
        self._size = len(values)
        self._tree = [0] * (4 * self._size + 5)
        self._build(list(values), 0, 0, self._size - 1)

    def _build(self, values: list[int], index: int, start: int, end: int) -> None:
        if start == end:
            self._tree[index] = values[start]
            return
        mid = (start + end) // 2
        left, right = 2 * index + 1, 2 * index + 2
        self._build(values, left, start, mid)
        self._build(values, right, mid + 1, end)
        self._tree[index] = min(self._tree[left], self._tree[right])

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> int:
        """Return the minimum of positions ``left..right`` inclusive, 0-based."""
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range {left}..{right} is not within 0..{self._size - 1}")

        def descend(index: int, start: int, end: int) -> float:
            if right < start or end < left:
                return float("inf")
            if left <= start and end <= right:
                return self._tree[index]
            mid = (start + end) // 2
            return min(
                descend(2 * index + 1, start, mid),
                descend(2 * index + 2, mid + 1, end),
            )

        return descend(0, 0, self._size - 1)

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` (0-based) to ``value``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is not within 0..{self._size - 1}")
        node, start, end = 0, 0, self._size - 1
        path = []
        while start != end:
            path.append(node)
            mid = (start + end) // 2
            if index <= mid:
                node, end = 2 * node + 1, mid
            else:
                node, start = 2 * node + 2, mid + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = min(self._tree[2 * parent + 1], self._tree[2 * parent + 2])