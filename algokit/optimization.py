"""Dynamic programming for optimisation problems over sequences and grids."""

from functools import lru_cache
from itertools import accumulate
from typing import Sequence


def max_coins(balloons: Sequence[int]) -> int:
    """Return the most coins collectable by bursting every balloon.

    Bursting a balloon pays the product of its value and its current
    neighbours' values, with a value of 1 beyond either end.
    """
    padded = [1, *balloons, 1]
    size = len(padded)
    # best[lo][hi]: coins from bursting everything strictly between lo and hi.
    best = [[0] * size for _ in range(size)]
    for gap in range(2, size):
        for lo in range(size - gap):
            hi = lo + gap
            best[lo][hi] = max(
                [0]
                + [
                    best[lo][i] + best[i][hi] + padded[lo] * padded[i] * padded[hi]
                    for i in range(lo + 1, hi)
                ]
            )
    return best[0][size - 1]


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a chain.

    Matrix ``i`` (1-based) has shape ``dims[i - 1] x dims[i]``.
    """
    n = len(dims)
    if n < 2:
        return 0
    cost = [[0] * n for _ in range(n)]
    for span in range(1, n - 1):
        for start in range(1, n - span):
            end = start + span
            cost[start][end] = min(
                cost[start][k] + cost[k + 1][end] + dims[start - 1] * dims[k] * dims[end]
                for k in range(start, end)
            )
    return cost[1][n - 1]


def friends_pairings(n: int) -> int:
    """Return the number of ways ``n`` friends can stay single or pair up."""
    if n < 0:
        raise ValueError("the number of friends must not be negative")
    two_back, one_back = 1, 1
    for i in range(2, n + 1):
        two_back, one_back = one_back, one_back + (i - 1) * two_back
    return one_back


def max_non_adjacent_sum(values: Sequence[int]) -> int:
    """Return the largest sum of values no two of which are adjacent.

    Keeps only the best sums including and excluding the latest value, so the
    empty choice (0) is allowed.
    """
    if not values:
        raise ValueError("values must not be empty")
    included, excluded = values[0], 0
    for value in values[1:]:
        included, excluded = excluded + value, max(included, excluded)
    return max(included, excluded)


def max_non_adjacent_sum_dp(values: Sequence[int]) -> int:
    """Return the largest sum of values no two of which are adjacent.

    Tabulates the best sum of every prefix; the first value seeds the table.
    """
    if not values:
        raise ValueError("values must not be empty")
    if len(values) == 1:
        return values[0]
    two_back, one_back = values[0], max(values[0], values[1])
    for value in values[2:]:
        two_back, one_back = one_back, max(one_back, two_back + value)
    return one_back


def max_sum_rectangle(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest sum of any non-empty rectangular sub-matrix."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("every row must have the same length")

    best = rows[0][0]
    for top in range(len(rows)):
        column_sums = [0] * width
        for row in rows[top:]:
            column_sums = [total + cell for total, cell in zip(column_sums, row)]
            running = 0
            for total in column_sums:
                if running < 0:
                    running = 0
                running += total
                best = max(best, running)
    return best


def tsp_tour_cost(dist: Sequence[Sequence[int]]) -> int:
    """Return the cost of the cheapest tour from city 0 through every city and back."""
    table = tuple(tuple(row) for row in dist)
    n = len(table)
    if n == 0:
        raise ValueError("there must be at least one city")
    if any(len(row) != n for row in table):
        raise ValueError("the distance matrix must be square")
    everyone = (1 << n) - 1

    @lru_cache(maxsize=None)
    def visit(mask: int, position: int) -> int:
        if mask == everyone:
            return table[position][0]
        return min(
            table[position][city] + visit(mask | (1 << city), city)
            for city in range(n)
            if not mask >> city & 1
        )

    return visit(1, 0)


def word_wrap(lengths: Sequence[int], width: int) -> list[tuple[int, int]]:
    """Break words into lines minimising the sum of squared trailing spaces.

    The last line costs nothing. Returns each line as ``(first, last)``
    1-based word numbers, inclusive.
    """
    n = len(lengths)
    prefix = [0, *accumulate(lengths)]
    best: list[int | None] = [0] + [None] * n
    line_start = [0] * (n + 1)
    for end in range(1, n + 1):
        for start in range(1, end + 1):
            before = best[start - 1]
            if before is None:
                continue
            slack = width - (prefix[end] - prefix[start - 1]) - (end - start)
            if slack < 0:
                continue
            total = before + (0 if end == n else slack * slack)
            if best[end] is None or total < best[end]:
                best[end] = total
                line_start[end] = start
    if best[n] is None:
        raise ValueError("some word does not fit within the line width")

    lines = []
    end = n
    while end:
        start = line_start[end]
        lines.append((start, end))
        end = start - 1
    lines.reverse()
    return lines