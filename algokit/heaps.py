"""A binary min-heap and an in-place style heap sort."""

import heapq
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class MinHeap:
    """A binary heap that always yields its smallest value first."""

    _items: list[int] = field(default_factory=list, repr=False)

    def push(self, value: int) -> None:
        """Add a value to the heap."""
        heapq.heappush(self._items, value)

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def pop(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a max-heap."""
    items = list(values)

    def sift_down(root: int, size: int) -> None:
        while True:
            largest = root
            left = 2 * root + 1
            right = left + 1
            if left < size and items[left] > items[largest]:
                largest = left
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == root:
                return
            items[root], items[largest] = items[largest], items[root]
            root = largest

    size = len(items)
    for root in range(size // 2, -1, -1):
        sift_down(root, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(0, end)
    return items