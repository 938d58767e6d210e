import pytest
from hypothesis import given, strategies as st

from algokit.caches import LFUCache, LRUCache


def test_lru_sample_sequence():
    lru = LRUCache(2)
    lru.put(1, 1)
    lru.put(2, 2)
    assert lru.get(1) == 1
    lru.put(3, 3)
    assert lru.get(2) == -1
    lru.put(4, 4)
    assert lru.get(1) == -1
    assert lru.get(3) == 3
    assert lru.get(4) == 4


def test_lfu_sample_sequence():
    lfu = LFUCache(2)
    lfu.put(1, 1)
    lfu.put(2, 2)
    assert lfu.get(1) == 1
    lfu.put(3, 3)
    assert lfu.get(2) == -1
    lfu.put(4, 4)
    assert lfu.get(1) == 1
    assert lfu.get(3) == -1
    assert lfu.get(4) == 4


def test_lru_put_updates_value():
    lru = LRUCache(2)
    lru.put(1, 10)
    lru.put(1, 20)
    assert lru.get(1) == 20


def test_lfu_put_updates_value():
    lfu = LFUCache(2)
    lfu.put(1, 10)
    lfu.put(1, 20)
    assert lfu.get(1) == 20


def test_lfu_ties_evict_least_recent():
    lfu = LFUCache(2)
    lfu.put(1, 1)
    lfu.put(2, 2)
    lfu.put(3, 3)
    assert lfu.get(1) == -1
    assert lfu.get(2) == 2
    assert lfu.get(3) == 3


def test_lru_zero_capacity_holds_nothing():
    lru = LRUCache(0)
    lru.put(1, 1)
    assert lru.get(1) == -1


def test_invalid_capacities():
    with pytest.raises(ValueError):
        LRUCache(-1)
    with pytest.raises(ValueError):
        LFUCache(0)


@given(st.integers(1, 5), st.lists(st.integers(0, 100), unique=True, max_size=20))
def test_lru_keeps_last_capacity_keys(capacity, keys):
    lru = LRUCache(capacity)
    for key in keys:
        lru.put(key, key + 1)
    kept = keys[-capacity:]
    for key in keys:
        assert lru.get(key) == (key + 1 if key in kept else -1)


@given(st.integers(1, 5), st.lists(st.integers(0, 100), unique=True, max_size=20))
def test_lfu_keeps_last_capacity_keys_without_reads(capacity, keys):
    lfu = LFUCache(capacity)
    for key in keys:
        lfu.put(key, key * 2)
    kept = set(keys[-capacity:])
    for key in keys:
        assert lfu.get(key) == (key * 2 if key in kept else -1)


@given(st.integers(1, 4), st.lists(st.tuples(st.integers(0, 8), st.integers()), max_size=30))
def test_last_put_is_always_readable(capacity, puts):
    lru = LRUCache(capacity)
    lfu = LFUCache(capacity)
    for key, value in puts:
        lru.put(key, value)
        lfu.put(key, value)
        assert lru.get(key) == value
        assert lfu.get(key) == value