"""A prefix tree over words of lower-case ASCII letters."""

from __future__ import annotations

import string
from collections.abc import Iterable

_ALPHABET = frozenset(string.ascii_lowercase)


class _Node:
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_end = False


def _check(word: str) -> None:
    if not set(word) <= _ALPHABET:
        raise ValueError(f"only lower-case letters a-z are allowed: {word!r}")


class Trie:
    """Stores words and answers exact-word and prefix queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def _walk(self, text: str) -> _Node | None:
        _check(text)
        node = self._root
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word``; raises ValueError for characters outside a-z."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.search(word)