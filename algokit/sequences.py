"""Dynamic programming over strings and sequences."""

from bisect import bisect_left
from functools import lru_cache
from typing import Iterable, Sequence


def edit_distance_recursive(word1: str, word2: str) -> int:
    """Return the Levenshtein distance using memoised recursion."""

    @lru_cache(maxsize=None)
    def solve(i: int, j: int) -> int:
        # i and j are the lengths of the prefixes still to be matched.
        if i == 0:
            return j
        if j == 0:
            return i
        if word1[i - 1] == word2[j - 1]:
            return solve(i - 1, j - 1)
        return 1 + min(
            solve(i, j - 1),  # insert
            solve(i - 1, j),  # delete
            solve(i - 1, j - 1),  # replace
        )

    return solve(len(word1), len(word2))


def edit_distance(word1: str, word2: str) -> int:
    """Return the Levenshtein distance using a full bottom-up table."""
    n, m = len(word1), len(word2)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for j in range(m + 1):
        table[0][j] = j
    for i, ch in enumerate(word1, 1):
        table[i][0] = i
        for j, other in enumerate(word2, 1):
            if ch == other:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j], table[i][j - 1], table[i - 1][j - 1]
                )
    return table[n][m]


def edit_distance_compact(word1: str, word2: str) -> int:
    """Return the Levenshtein distance keeping only two table rows."""
    prev = list(range(len(word2) + 1))
    for i, ch in enumerate(word1, 1):
        cur = [i] + [0] * len(word2)
        for j, other in enumerate(word2, 1):
            if ch == other:
                cur[j] = prev[j - 1]
            else:
                cur[j] = 1 + min(prev[j], cur[j - 1], prev[j - 1])
        prev = cur
    return prev[-1]


def lcs_length_recursive(a: str, b: str) -> int:
    """Return the longest common subsequence length using memoised recursion."""

    @lru_cache(maxsize=None)
    def solve(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return 0
        if a[i - 1] == b[j - 1]:
            return solve(i - 1, j - 1) + 1
        return max(solve(i - 1, j), solve(i, j - 1))

    return solve(len(a), len(b))


def lcs_length(a: str, b: str) -> int:
    """Return the longest common subsequence length using a full table."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ch in enumerate(a, 1):
        for j, other in enumerate(b, 1):
            if ch == other:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[len(a)][len(b)]


def lcs_length_compact(a: str, b: str) -> int:
    """Return the longest common subsequence length keeping two table rows."""
    prev = [0] * (len(b) + 1)
    for ch in a:
        cur = [0] * (len(b) + 1)
        for j, other in enumerate(b, 1):
            if ch == other:
                cur[j] = prev[j - 1] + 1
            else:
                cur[j] = max(cur[j - 1], prev[j])
        prev = cur
    return prev[-1]


def lis_length_quadratic(nums: Sequence[int]) -> int:
    """Return the longest strictly increasing subsequence length in O(n^2)."""
    if len(nums) == 1:
        return 1
    ending_at: list[int] = []
    best = 0
    for i, num in enumerate(nums):
        length = 1 + max(
            (ending_at[j] for j in range(i) if nums[j] < num), default=0
        )
        ending_at.append(length)
        if i > 0:
            best = max(best, length)
    return best


def lis_length(nums: Sequence[int]) -> int:
    """Return the longest strictly increasing subsequence length in O(n log n)."""
    tails: list[int] = []
    for num in nums:
        pos = bisect_left(tails, num)
        if pos == len(tails):
            tails.append(num)
        else:
            tails[pos] = num
    return len(tails)


def longest_palindromic_substring(s: str) -> str:
    """Return the longest palindromic substring by expanding around centres.

    Among equally long palindromes the one found first, scanning centres from
    the left, is returned.
    """
    if not s:
        return ""
    n = len(s)
    best_start, best_len = 0, 1
    for mid in range(n):
        for left, right in ((mid - 1, mid + 1), (mid, mid + 1)):
            while left >= 0 and right < n and s[left] == s[right]:
                length = right - left + 1
                if length > best_len:
                    best_start, best_len = left, length
                left -= 1
                right += 1
    return s[best_start:best_start + best_len]


def longest_palindromic_substring_dp(s: str) -> str:
    """Return the longest palindromic substring using an interval table.

    Start positions are scanned from the right, so among equally long
    palindromes the rightmost one is returned.
    """
    n = len(s)
    if n == 0:
        return ""
    is_pal = [[False] * n for _ in range(n)]
    best_start, best_len = 0, 0
    for i in range(n - 1, -1, -1):
        for j in range(i, n):
            is_pal[i][j] = s[i] == s[j] and (j - i < 2 or is_pal[i + 1][j - 1])
            if is_pal[i][j] and j - i + 1 > best_len:
                best_start, best_len = i, j - i + 1
    return s[best_start:best_start + best_len]


def count_palindromic_subsequences(s: str) -> int:
    """Return the number of palindromic subsequences, counted by position."""
    n = len(s)
    if n == 0:
        return 0
    counts = [[0] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        counts[i][i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                counts[i][j] = counts[i + 1][j] + counts[i][j - 1] + 1
            else:
                inner = counts[i + 1][j - 1] if i + 1 <= j - 1 else 0
                counts[i][j] = counts[i + 1][j] + counts[i][j - 1] - inner
    return counts[0][n - 1]


def count_sentences(s: str, dictionary: Iterable[str]) -> int:
    """Return how many ways ``s`` splits into a sequence of dictionary words."""
    words = set(dictionary)
    ways = [1] + [0] * len(s)
    for end in range(1, len(s) + 1):
        ways[end] = sum(
            ways[start]
            for start in range(end)
            if ways[start] and s[start:end] in words
        )
    return ways[-1]