"""Array problems: duplicates, selection, subarrays and pair sums."""

import random
from bisect import bisect_left, bisect_right
from typing import Optional, Sequence


def find_duplicate(values: Sequence[int]) -> int:
    """Return the repeated value in ``n + 1`` integers drawn from ``1..n``.

    Uses Floyd's cycle detection, treating each value as a link to an index.
    """
    n = len(values) - 1
    if n < 1:
        raise ValueError("need at least two values")
    if any(not 1 <= v <= n for v in values):
        raise ValueError(f"every value must lie in 1..{n}")

    slow = fast = values[0]
    while True:
        slow = values[slow]
        fast = values[values[fast]]
        if slow == fast:
            break

    fast = values[0]
    while slow != fast:
        slow = values[slow]
        fast = values[fast]
    return fast


def odd_frequency_element(values: Sequence[int]) -> int:
    """Return the value occurring an odd number of times in a sorted sequence.

    Every other value must occur an even number of times.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        key = values[mid]
        left = bisect_left(values, key, 0, mid + 1)
        right = bisect_right(values, key, mid, len(values)) - 1
        if (right - left + 1) % 2:
            return key
        if left % 2:
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError("no value occurs an odd number of times")


def can_jump(nums: Sequence[int]) -> bool:
    """Return whether the last index is reachable from the first.

    Each entry is the longest jump allowed from its position.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    if len(nums) == 1:
        return True
    current = farthest = nums[0]
    for i, step in enumerate(nums[:-1]):
        farthest = max(farthest, i + step)
        if current == i:
            current = farthest
            if current == i:
                return False
    return True


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) by randomised quickselect.

    The input is left untouched.
    """
    items = list(values)
    target = k - 1
    start, end = 0, len(items) - 1
    while start <= end:
        pick = random.randint(start, end)
        items[pick], items[end] = items[end], items[pick]
        pivot = items[end]
        j = start
        for i in range(start, end):
            if items[i] < pivot:
                items[i], items[j] = items[j], items[i]
                j += 1
        items[j], items[end] = items[end], items[j]

        if j == target:
            return items[j]
        if j > target:
            end = j - 1
        else:
            start = j + 1
    raise ValueError(f"the {k}-th smallest element does not exist")


def trapped_rainwater(heights: Sequence[int]) -> int:
    """Return the water trapped above an elevation map of unit-wide bars."""
    total = 0
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                total += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                total += right_max - heights[right]
            right -= 1
    return total


def max_product_subarray(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    prefix = suffix = 1
    best = None
    for front, back in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane)."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for num in nums:
        running += num
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return indices ``(i, j)`` with ``nums[i] + nums[j] == target``.

    ``i`` is the later index and ``j`` the earlier; ``None`` when no pair exists.
    """
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        other = seen.get(target - num)
        if other is not None:
            return i, other
        seen[num] = i
    return None


def two_sum_sorted(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return 0-based indices ``(i, j)``, ``i < j``, of a pair in a sorted sequence
    adding up to ``target``, or ``None`` when there is none."""
    start, end = 0, len(nums) - 1
    while start < end:
        total = nums[start] + nums[end]
        if total == target:
            return start, end
        if total < target:
            start += 1
        else:
            end -= 1
    return None