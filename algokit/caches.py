"""Fixed-capacity caches with least-recently and least-frequently used eviction."""

from collections import OrderedDict

MISSING = -1


class LRUCache:
    """A cache that evicts the least recently used key when over capacity.

    ``get`` returns -1 for keys not held.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it as most recently used."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the stalest key if needed."""
        self._entries.pop(key, None)
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)


class LFUCache:
    """A cache that evicts the least frequently used key when full.

    Ties in frequency go to the least recently used key. ``get`` returns -1
    for keys not held.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._values: dict[int, int] = {}
        self._frequency: dict[int, int] = {}
        self._by_frequency: dict[int, OrderedDict[int, None]] = {}
        self._min_frequency = 0

    def _touch(self, key: int) -> None:
        freq = self._frequency[key]
        bucket = self._by_frequency[freq]
        del bucket[key]
        if not bucket:
            del self._by_frequency[freq]
            if freq == self._min_frequency:
                self._min_frequency += 1
        self._frequency[key] = freq + 1
        self._by_frequency.setdefault(freq + 1, OrderedDict())[key] = None

    def get(self, key: int) -> int:
        """Return the value for ``key`` and count one more use of it."""
        if key not in self._values:
            return MISSING
        self._touch(key)
        return self._values[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting a key first if the cache is full."""
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) == self.capacity:
            bucket = self._by_frequency[self._min_frequency]
            victim, _ = bucket.popitem(last=False)
            if not bucket:
                del self._by_frequency[self._min_frequency]
            del self._values[victim]
            del self._frequency[victim]
        self._values[key] = value
        self._frequency[key] = 1
        self._min_frequency = 1
        self._by_frequency.setdefault(1, OrderedDict())[key] = None