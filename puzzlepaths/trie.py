"""A lowercase prefix tree used as a word dictionary."""

from __future__ import annotations

import enum
import string
from collections.abc import Iterable, Iterator
from os import PathLike

_LETTERS = frozenset(string.ascii_lowercase)


class SearchResult(enum.Enum):
    """Outcome of looking a word up in a :class:`Trie`."""

    NOT_FOUND = "NOT FOUND"
    PARTIAL = "PARTIAL"
    FOUND = "FOUND"


class _Node:
    __slots__ = ("children", "complete")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.complete = False


def _check_letter(ch: str) -> None:
    if ch not in _LETTERS:
        raise ValueError(f"word contains non-alphabetical character {ch!r}")


class Trie:
    """Case-insensitive set of words made of the letters a to z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Trie:
        """Build a trie from a file of whitespace-separated words."""
        with open(path, encoding="utf-8") as handle:
            return cls(handle.read().split())

    def insert(self, word: str) -> None:
        """Add a word; empty words are ignored, non-letters raise ValueError."""
        node = self._root
        for ch in word.lower():
            _check_letter(ch)
            node = node.children.setdefault(ch, _Node())
        if node is not self._root:
            node.complete = True

    def search(self, word: str) -> SearchResult:
        """Report whether a word is stored, is only a prefix, or is absent."""
        node = self._root
        for ch in word.lower():
            _check_letter(ch)
            child = node.children.get(ch)
            if child is None:
                return SearchResult.NOT_FOUND
            node = child
        return SearchResult.FOUND if node.complete else SearchResult.PARTIAL

    def __iter__(self) -> Iterator[str]:
        """Yield every stored word in alphabetical order."""
        stack: list[tuple[_Node, str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.complete:
                yield prefix
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], prefix + ch))