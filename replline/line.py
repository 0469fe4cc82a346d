"""The line being edited, kept together with its display tokens."""

from __future__ import annotations

from collections.abc import Iterable

from .tokenizer import Token, tokenize

_LABEL_STYLE = "\x1b[38;5;0m\x1b[48;5;15m"
_RESET = "\x1b[0m"

# Characters that are typed together with their closing partner.
_PAIRS = {"(": ")", "[": "]", "{": "}", "'": "'", '"': '"'}


class Line:
    """Text of one input line, its line-number label and its tokens.

    While a history entry is shown, ``tokens`` describe that entry and
    ``content`` keeps the line's own text.
    """

    def __init__(
        self,
        line_count: int,
        *,
        support_ansi: bool = True,
        keywords: Iterable[str] = (),
    ) -> None:
        label = str(line_count)
        self.content = ""
        self.is_history = False
        self.keywords = frozenset(keywords)
        self.label_width = len(label) + 1
        if support_ansi:
            self.label = f" {_LABEL_STYLE}{label}{_RESET}"
        else:
            self.label = f" {label}"
        self.tokens: list[Token] = []

    def _refresh(self) -> None:
        self.tokens = tokenize(self.content, self.keywords)

    def push(self, ch: str) -> None:
        """Append ``ch``; an opening bracket or quote brings its closing partner."""
        self.content += ch + _PAIRS.get(ch, "")
        self._refresh()

    def push_str(self, text: str) -> None:
        """Append ``text`` as it is."""
        self.content += text
        self._refresh()

    def pop(self) -> None:
        """Drop the last character, if any."""
        self.content = self.content[:-1]
        self._refresh()

    def insert(self, index: int, ch: str) -> None:
        """Insert ``ch`` before position ``index``."""
        if not 0 <= index <= len(self.content):
            raise IndexError(
                f"insertion index {index} out of range for line of length {len(self.content)}"
            )
        self.content = self.content[:index] + ch + self.content[index:]
        self._refresh()

    def remove(self, index: int) -> None:
        """Delete the character at position ``index``."""
        if not 0 <= index < len(self.content):
            raise IndexError(
                f"removal index {index} out of range for line of length {len(self.content)}"
            )
        self.content = self.content[:index] + self.content[index + 1:]
        self._refresh()

    def use_history(self, content: str) -> None:
        """Show ``content`` from history without touching the line's own text."""
        self.is_history = True
        self.tokens = tokenize(content, self.keywords)

    def reset(self) -> None:
        """Go back to showing the line's own text."""
        self.is_history = False
        self._refresh()

    def reset_with(self, new_content: str) -> None:
        """Replace the line's text with ``new_content`` and show it."""
        self.content = new_content
        self.is_history = False
        self._refresh()

    def __len__(self) -> int:
        return len(self.content)