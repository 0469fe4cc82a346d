"""Cycling through completion candidates."""

from __future__ import annotations

from collections.abc import Iterable


class Candidate:
    """A list of hints with a cursor that wraps around."""

    def __init__(self) -> None:
        self._items: list[str] = []
        self._index = 0

    def set(self, candidates: Iterable[str]) -> None:
        """Replace the hints and put the cursor before the first one."""
        self._items = list(candidates)
        self._index = -1

    def clear(self) -> None:
        """Drop all hints."""
        self._items.clear()

    def current_hint(self) -> str | None:
        """Return the hint under the cursor, or None if there is none."""
        if self._items and self._index >= 0:
            return self._items[self._index]
        return None

    def next(self) -> str | None:
        """Advance the cursor, wrapping at the end, and return the hint there."""
        if not self._items:
            return None
        self._index = (self._index + 1) % len(self._items)
        return self._items[self._index]