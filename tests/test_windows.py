import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.windows import window_maxima


def test_sample():
    values = [8, 5, 10, 7, 9, 4, 15, 12, 90, 13]
    assert window_maxima(values, 4) == [10, 10, 10, 15, 15, 90, 90]


def test_window_of_one_returns_values():
    values = [3, 1, 4, 1, 5]
    assert window_maxima(values, 1) == values


def test_full_window_returns_overall_max():
    values = [3, 1, 4, 1, 5, 9, 2]
    assert window_maxima(values, len(values)) == [max(values)]


@pytest.mark.parametrize("k", [0, -1, 4])
def test_invalid_window_size(k):
    with pytest.raises(ValueError):
        window_maxima([1, 2, 3], k)


@given(st.data())
def test_each_maximum_dominates_its_window(data):
    values = data.draw(st.lists(st.integers(0, 50), min_size=1, max_size=15))
    k = data.draw(st.integers(1, len(values)))
    maxima = window_maxima(values, k)
    assert len(maxima) == len(values) - k + 1
    for start, best in enumerate(maxima):
        window = values[start:start + k]
        assert best in window
        assert all(best >= v for v in window)