"""Sliding-window maxima using a monotonic deque."""

from collections import deque
from typing import Sequence


def window_maxima(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of length ``k``."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must lie in 1..{len(values)}")
    candidates: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(values):
        while candidates and candidates[0] <= i - k:
            candidates.popleft()
        while candidates and value >= values[candidates[-1]]:
            candidates.pop()
        candidates.append(i)
        if i >= k - 1:
            maxima.append(values[candidates[0]])
    return maxima