"""Line history navigated from the newest entry backwards."""

from __future__ import annotations


class History:
    """Entered lines, with a position counted back from the newest one.

    Position 0 means no history entry is selected.
    """

    def __init__(self) -> None:
        self._index = 0
        self._entries: list[str] = []

    def previous(self) -> str | None:
        """Step to the next older entry and return it, or None past the oldest."""
        if self._index < len(self._entries):
            self._index += 1
            return self._entries[-self._index]
        return None

    def next(self) -> str | None:
        """Step to the next newer entry and return it, or None once back at the start."""
        if self._index > 0:
            self._index -= 1
        if self._index > 0:
            return self._entries[-self._index]
        return None

    def reset_index(self) -> None:
        """Deselect any entry."""
        self._index = 0

    def current(self) -> str | None:
        """Return the selected entry, or None if none is selected."""
        if self._index:
            return self._entries[-self._index]
        return None

    def append(self, line_content: str) -> None:
        """Record a line and deselect any entry."""
        self._index = 0
        self._entries.append(line_content)

    def __len__(self) -> int:
        return len(self._entries)