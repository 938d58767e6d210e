"""Stack-based problems: expression conversion, histograms and stack reshaping."""

from typing import Sequence

_RANK = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators ``+ - * / ^`` are all treated as left-associative.
    """
    output: list[str] = []
    operators: list[str] = []
    for ch in infix:
        if ch == "(":
            operators.append(ch)
        elif ch == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced ')' in expression")
            operators.pop()
        elif ch in _RANK:
            while operators and _RANK.get(operators[-1], 0) >= _RANK[ch]:
                output.append(operators.pop())
            operators.append(ch)
        else:
            output.append(ch)
    while operators:
        top = operators.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return "".join(output)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the largest rectangular area under a histogram of unit-wide bars."""
    bars = list(heights)
    best = 0
    rising: list[int] = []
    for i, height in enumerate([*bars, None]):
        while rising and (height is None or bars[rising[-1]] > height):
            bar = bars[rising.pop()]
            left = rising[-1] if rising else -1
            best = max(best, bar * (i - left - 1))
        rising.append(i)
    return best


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """Return, for each value, the first later value greater than it, or -1."""
    result = [-1] * len(values)
    waiting: list[int] = []
    for i, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(i)
    return result


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack reversed; stacks are listed from bottom to top."""
    return list(reversed(stack))


def sort_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack sorted so that the largest value is on top.

    Stacks are listed from bottom to top.
    """
    return sorted(stack)