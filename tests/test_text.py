import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.text import count_occurrences, prefix_table


def test_count_occurrences_sample():
    assert count_occurrences("AABA", "AABAACAADAABAABA") == 3


def test_prefix_table_sample():
    assert prefix_table("AABA") == [-1, 0, 1, 0, 1]


def test_prefix_table_empty_pattern():
    assert prefix_table("") == [-1]


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        count_occurrences("", "abc")


def test_pattern_longer_than_text():
    assert count_occurrences("abcd", "abc") == 0


@given(st.text(alphabet="ab", min_size=1, max_size=4), st.text(alphabet="ab", max_size=20))
def test_count_matches_every_starting_position(pattern, text):
    starts = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert count_occurrences(pattern, text) == len(starts)


@given(st.text(alphabet="abc", max_size=12))
def test_prefix_table_entries_are_borders(pattern):
    table = prefix_table(pattern)
    assert len(table) == len(pattern) + 1
    for i, border in enumerate(table[1:], 1):
        assert 0 <= border < i
        assert pattern[:border] == pattern[i - border:i]