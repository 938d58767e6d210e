from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algokit.stacks import (
    infix_to_postfix,
    largest_rectangle_area,
    next_greater_elements,
    reverse_stack,
    sort_stack,
)

SAMPLE_INFIX = "a+b*(c^d-e)^(f+g*h)-i"


def test_infix_sample():
    assert infix_to_postfix(SAMPLE_INFIX) == "abcd^e-fgh*+^*+i-"


def test_infix_keeps_operand_order_and_drops_parentheses():
    postfix = infix_to_postfix(SAMPLE_INFIX)
    assert [c for c in postfix if c.isalpha()] == [c for c in SAMPLE_INFIX if c.isalpha()]
    assert "(" not in postfix and ")" not in postfix
    assert Counter(postfix) == Counter(c for c in SAMPLE_INFIX if c not in "()")


@pytest.mark.parametrize("expression", ["a+b)", "(a+b", ")a"])
def test_infix_unbalanced_raises(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)


def test_largest_rectangle_sample():
    assert largest_rectangle_area([7, 2, 8, 9, 1, 3, 6, 5]) == 16


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=30))
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_next_greater_sample():
    assert next_greater_elements([6, 8, 0, 1, 3]) == [8, -1, 1, 3, -1]


@given(st.lists(st.integers(min_value=0, max_value=100), max_size=30))
def test_next_greater_is_first_larger_later_value(values):
    result = next_greater_elements(values)
    assert len(result) == len(values)
    for i, (value, found) in enumerate(zip(values, result)):
        later = [v for v in values[i + 1:] if v > value]
        if later:
            assert found == later[0]
        else:
            assert found == -1


@given(st.lists(st.integers(), max_size=20))
def test_reverse_stack_round_trip(stack):
    reversed_stack = reverse_stack(stack)
    assert reverse_stack(reversed_stack) == stack
    if stack:
        assert reversed_stack[0] == stack[-1]
        assert reversed_stack[-1] == stack[0]


def test_reverse_stack_sample():
    assert reverse_stack([4, 3, 2, 1]) == [1, 2, 3, 4]


@given(st.lists(st.integers(), max_size=30))
def test_sort_stack_orders_and_preserves(stack):
    result = sort_stack(stack)
    assert Counter(result) == Counter(stack)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_sort_stack_sample_top_is_largest():
    result = sort_stack([1, 4, 2, 6, 2, 9, 2])
    assert result[-1] == 9
    assert result[0] == 1