from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algokit.heaps import MinHeap, heap_sort


def test_min_heap_sample_order():
    heap = MinHeap()
    for value in (6, 9, 8, 1, 10, 2):
        heap.push(value)
    drained = []
    while heap:
        drained.append(heap.pop())
    assert drained == [1, 2, 6, 8, 9, 10]


def test_min_heap_peek_does_not_remove():
    heap = MinHeap()
    heap.push(5)
    heap.push(3)
    assert heap.peek() == 3
    assert len(heap) == 2


def test_min_heap_empty_peek_raises():
    with pytest.raises(IndexError):
        MinHeap().peek()


def test_min_heap_empty_pop_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


@given(st.lists(st.integers(), max_size=40))
def test_min_heap_drains_in_order(values):
    heap = MinHeap()
    for value in values:
        heap.push(value)
    assert len(heap) == len(values)
    drained = [heap.pop() for _ in range(len(values))]
    assert Counter(drained) == Counter(values)
    assert all(a <= b for a, b in zip(drained, drained[1:]))
    assert len(heap) == len(values) - len(drained)


def test_heap_sort_sample():
    assert heap_sort([3, 4, 2, 5, 1, 0, 9, 8]) == [0, 1, 2, 3, 4, 5, 8, 9]


def test_heap_sort_leaves_input_untouched():
    values = [3, 1, 2]
    heap_sort(values)
    assert values == [3, 1, 2]


@given(st.lists(st.integers(), max_size=50))
def test_heap_sort_orders_and_preserves(values):
    result = heap_sort(values)
    assert Counter(result) == Counter(values)
    assert all(a <= b for a, b in zip(result, result[1:]))