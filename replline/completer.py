"""A prefix tree that suggests the remaining part of known words."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

# Marks that a word ends at this node; sorts before every other character.
_END = "\0"


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)

    def insert(self, word: str) -> None:
        node = self
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.children[_END] = _Node()

    def find(self, prefix: str) -> _Node | None:
        node = self
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def collect(self, partial: str) -> Iterator[str]:
        if not self.children:
            yield partial
            return
        for ch in sorted(self.children):
            if ch == _END:
                yield partial
            else:
                yield from self.children[ch].collect(partial + ch)


class Completer:
    """Stores words and lists the completions of a prefix."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        self.extend(words)

    def insert(self, word: str) -> None:
        """Add one word."""
        self._root.insert(word)

    def extend(self, words: Iterable[str]) -> None:
        """Add every word of ``words``."""
        for word in words:
            self.insert(word)

    def complete(self, word: str) -> list[str]:
        """Return the suffixes that complete ``word`` into known words, in sorted order.

        A word equal to ``word`` itself contributes nothing.
        """
        node = self._root.find(word)
        if node is None:
            return []
        return [
            suffix
            for ch in sorted(node.children)
            if ch != _END
            for suffix in node.children[ch].collect(ch)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Completer):
            return NotImplemented
        return self._root == other._root

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.complete('')!r})"