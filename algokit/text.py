"""Pattern matching with the Knuth-Morris-Pratt algorithm."""


def prefix_table(pattern: str) -> list[int]:
    """Return the KMP failure table of ``pattern``.

    The table has ``len(pattern) + 1`` entries; entry ``i`` is the length of
    the longest proper border of ``pattern[:i]``, with ``-1`` at index 0.
    """
    table = [-1]
    j = -1
    for ch in pattern:
        while j >= 0 and ch != pattern[j]:
            j = table[j]
        j += 1
        table.append(j)
    return table


def count_occurrences(pattern: str, text: str) -> int:
    """Return how many times ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_table(pattern)
    found = 0
    j = 0
    for ch in text:
        while j >= 0 and ch != pattern[j]:
            j = table[j]
        j += 1
        if j == len(pattern):
            found += 1
            j = table[j]
    return found