import pytest
from hypothesis import given, strategies as st

from algokit.trie import Trie, XorTrie, find_maximum_xor


@pytest.fixture
def fruit():
    trie = Trie()
    for word in ("apple", "appy", "banana", "mango"):
        trie.insert(word)
    return trie


def test_search(fruit):
    assert fruit.search("man") is False
    assert fruit.search("apple") is True
    assert fruit.search("app") is False
    assert "mango" in fruit


def test_starts_with(fruit):
    assert fruit.starts_with("app") is True
    assert fruit.starts_with("apples") is False
    assert fruit.starts_with("bana") is True
    assert fruit.starts_with("") is True


def test_empty_word():
    trie = Trie()
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True


@given(st.lists(st.text(alphabet="abc", max_size=6), max_size=20))
def test_inserted_words_and_prefixes_found(words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    for word in words:
        assert trie.search(word)
        assert all(trie.starts_with(word[:cut]) for cut in range(len(word) + 1))


def test_find_maximum_xor_sample():
    assert find_maximum_xor([3, 10, 5, 25, 2, 8]) == 28


def test_find_maximum_xor_empty():
    assert find_maximum_xor([]) == 0


@given(st.integers(0, 2**32 - 1))
def test_single_number_xors_to_zero(number):
    assert find_maximum_xor([number]) == 0


@given(st.lists(st.integers(0, 2**32 - 1), min_size=1, max_size=30), st.integers(0, 2**32 - 1))
def test_max_xor_with_is_attained_and_maximal(stored, probe):
    trie = XorTrie()
    for number in stored:
        trie.insert(number)
    best = trie.max_xor_with(probe)
    assert len(trie) == len(stored)
    assert all(best >= probe ^ other for other in stored)
    assert any(best == probe ^ other for other in stored)


def test_max_xor_with_empty_trie():
    with pytest.raises(LookupError):
        XorTrie().max_xor_with(1)


@pytest.mark.parametrize("number", [-1, 2**32])
def test_rejects_numbers_outside_32_bits(number):
    with pytest.raises(ValueError):
        XorTrie().insert(number)