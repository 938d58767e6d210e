"""Prefix trees for words and for the bits of 32-bit numbers."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

_BITS = 32


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    end: bool = False


class Trie:
    """A set of words supporting whole-word and prefix lookups."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.end = True

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Return whether any inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.search(word)


class _BitNode:
    __slots__ = ("links",)

    def __init__(self) -> None:
        self.links: list[Optional[_BitNode]] = [None, None]


def _check_number(number: int) -> None:
    if not 0 <= number < 1 << _BITS:
        raise ValueError(f"{number} is not an unsigned {_BITS}-bit number")


class XorTrie:
    """Unsigned 32-bit numbers stored bit by bit, for maximum-XOR lookups."""

    def __init__(self) -> None:
        self._root = _BitNode()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def insert(self, number: int) -> None:
        """Add ``number``."""
        _check_number(number)
        node = self._root
        for shift in range(_BITS - 1, -1, -1):
            bit = number >> shift & 1
            nxt = node.links[bit]
            if nxt is None:
                nxt = node.links[bit] = _BitNode()
            node = nxt
        self._count += 1

    def max_xor_with(self, number: int) -> int:
        """Return the largest ``number ^ other`` over the stored numbers."""
        _check_number(number)
        if not self._count:
            raise LookupError("the trie holds no numbers")
        node = self._root
        best = 0
        for shift in range(_BITS - 1, -1, -1):
            bit = number >> shift & 1
            opposite = node.links[1 - bit]
            if opposite is not None:
                best |= 1 << shift
                node = opposite
            else:
                node = node.links[bit]
        return best


def find_maximum_xor(nums: Iterable[int]) -> int:
    """Return the largest XOR of two (possibly equal) entries, or 0 for none."""
    values = list(nums)
    trie = XorTrie()
    for number in values:
        trie.insert(number)
    return max((trie.max_xor_with(number) for number in values), default=0)