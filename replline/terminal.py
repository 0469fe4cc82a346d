"""Terminal output, cursor movement and key input."""

from __future__ import annotations

import functools
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import blessed

_CSI = "\x1b["
_CLEAR_AFTER_CURSOR = "\x1b[K"
_LOG_FILE = "log.txt"

_SPECIAL_KEYS = {
    "\r": "ENTER",
    "\n": "ENTER",
    "\t": "TAB",
    "\x7f": "BACKSPACE",
    "\x08": "BACKSPACE",
    "\x1b": "ESCAPE",
}


@dataclass(frozen=True)
class Key:
    """A key press: either a character or a named key such as ``UP`` or ``ENTER``."""

    char: str | None = None
    name: str | None = None
    ctrl: bool = False


@functools.lru_cache(maxsize=None)
def _terminal() -> blessed.Terminal:
    return blessed.Terminal()


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _parse_key(text: str, name: str | None = None) -> Key | None:
    if name:
        return Key(name=name.removeprefix("KEY_"))
    if not text:
        return None
    if text in _SPECIAL_KEYS:
        return Key(name=_SPECIAL_KEYS[text])
    if len(text) != 1:
        return None
    code = ord(text)
    if 1 <= code <= 26:
        return Key(char=chr(code + ord("a") - 1), ctrl=True)
    return Key(char=text)


def width() -> int:
    """Number of columns of the terminal."""
    return shutil.get_terminal_size().columns


def height() -> int:
    """Number of rows of the terminal."""
    return shutil.get_terminal_size().lines


def flush() -> None:
    """Flush standard output."""
    sys.stdout.flush()


def clear_after_cursor() -> None:
    """Erase from the cursor to the end of the line."""
    _write(_CLEAR_AFTER_CURSOR)


def get_key() -> Key | None:
    """Wait for a key press and return it, or None if it is not recognised."""
    term = _terminal()
    with term.raw():
        keystroke: Any = term.inkey()
    return _parse_key(str(keystroke), keystroke.name if keystroke.is_sequence else None)


def cursor_position() -> tuple[int, int]:
    """Return the cursor's zero-based ``(column, row)``."""
    term = _terminal()
    with term.raw():
        row, col = term.get_location(timeout=1)
    if row < 0 or col < 0:
        raise OSError("terminal did not report the cursor position")
    return col, row


def cursor_col() -> int:
    """Zero-based column of the cursor."""
    return cursor_position()[0]


def cursor_row() -> int:
    """Zero-based row of the cursor."""
    return cursor_position()[1]


def move_to_col(target_col: int) -> None:
    """Move the cursor to a zero-based column of the current row."""
    _write(f"{_CSI}{target_col + 1}G")


def move_to_row(target_row: int) -> None:
    """Move the cursor to a zero-based row, keeping its column."""
    _write(f"{_CSI}{target_row + 1}d")


def cursor_left(cells: int) -> None:
    """Move the cursor ``cells`` columns to the left."""
    if cells:
        _write(f"{_CSI}{cells}D")


def cursor_right(cells: int) -> None:
    """Move the cursor ``cells`` columns to the right."""
    if cells:
        _write(f"{_CSI}{cells}C")


def save_position() -> None:
    """Remember the cursor position."""
    _write("\x1b7")


def restore_position() -> None:
    """Return the cursor to the remembered position."""
    _write("\x1b8")


def hide_cursor() -> None:
    """Make the cursor invisible."""
    _write(f"{_CSI}?25l")


def show_cursor() -> None:
    """Make the cursor visible."""
    _write(f"{_CSI}?25h")


def print_line(content: object) -> None:
    """Print ``content`` followed by CR LF, which also works in raw mode."""
    _write(f"{content}\r\n")


def log(content: str) -> None:
    """Overwrite ``log.txt`` in the working directory with ``content``."""
    Path(_LOG_FILE).write_text(content, encoding="utf-8")