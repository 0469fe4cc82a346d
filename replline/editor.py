"""An interactive single-line editor with history, hints and horizontal scrolling."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, Union

from . import terminal
from .analyzer import AnalysisError, Scope, analyze
from .candidate import Candidate
from .history import History
from .line import Line
from .terminal import Key
from .tokenizer import TextType, Token

_DIM = "\x1b[2m"
_RESET = "\x1b[0m"
_INTERRUPT_KEYS = frozenset("cd")


@dataclass(frozen=True)
class NewLine:
    """A line was entered."""

    content: str


@dataclass(frozen=True)
class Interrupt:
    """The user pressed Ctrl+C or Ctrl+D."""


@dataclass(frozen=True)
class NonAscii:
    """A non-ASCII character was typed and the line was abandoned."""


Signal = Union[NewLine, Interrupt, NonAscii]


@dataclass
class LineState:
    """Where the cursor stands relative to the visible area and the whole line."""

    left_end: bool = True
    right_end: bool = False
    line_start: bool = True
    line_end: bool = True


class Console(Protocol):
    """The terminal operations the editor needs."""

    def width(self) -> int: ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def clear_after_cursor(self) -> None: ...

    def get_key(self) -> Key | None: ...

    def cursor_col(self) -> int: ...

    def move_to_col(self, target_col: int) -> None: ...

    def cursor_left(self, cells: int) -> None: ...

    def cursor_right(self, cells: int) -> None: ...

    def save_position(self) -> None: ...

    def restore_position(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def print_line(self, content: object) -> None: ...


class _TerminalConsole:
    """Console backed by the real terminal."""

    width = staticmethod(terminal.width)
    flush = staticmethod(terminal.flush)
    clear_after_cursor = staticmethod(terminal.clear_after_cursor)
    get_key = staticmethod(terminal.get_key)
    cursor_col = staticmethod(terminal.cursor_col)
    move_to_col = staticmethod(terminal.move_to_col)
    cursor_left = staticmethod(terminal.cursor_left)
    cursor_right = staticmethod(terminal.cursor_right)
    save_position = staticmethod(terminal.save_position)
    restore_position = staticmethod(terminal.restore_position)
    hide_cursor = staticmethod(terminal.hide_cursor)
    show_cursor = staticmethod(terminal.show_cursor)
    print_line = staticmethod(terminal.print_line)

    @staticmethod
    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()


class LineEditor:
    """Reads lines from the keyboard, one at a time, with a prompt."""

    def __init__(
        self,
        prompt: str,
        *,
        support_ansi: bool = True,
        keywords: Iterable[str] = (),
        console: Console | None = None,
    ) -> None:
        self._console: Console = console if console is not None else _TerminalConsole()
        self.prompt = prompt
        self.support_ansi = support_ansi
        self.keywords = frozenset(keywords)
        self.history = History()
        self._candidate = Candidate()
        self._is_at = LineState()
        self.line_count = 1
        self._line = self._new_line()
        self._overflow_left = 0
        self._overflow_right = 0
        self._visible_area_width = self._console.width() - len(prompt) - 2

    def _new_line(self) -> Line:
        return Line(self.line_count, support_ansi=self.support_ansi, keywords=self.keywords)

    def _display_prompt(self) -> None:
        self._console.write(self.prompt)
        self._console.flush()

    def _move_cursor_to_prompt(self) -> None:
        self._console.move_to_col(len(self.prompt))

    def _render_with_fixed_pos(self) -> None:
        self._console.save_position()
        self._render()
        self._console.restore_position()

    def _clear_line(self) -> None:
        self._move_cursor_to_prompt()
        self._console.clear_after_cursor()

    def _back_operate(self) -> None:
        if self._overflow_left == 0:
            self._console.cursor_left(1)
        line = self._line
        if self._is_at.line_end:
            line.pop()
            self._overflow_left = max(len(line) - self._visible_area_width, 0)
        else:
            self._remove_edit()

    def _refresh(self) -> None:
        cursor_pos = self._console.cursor_col()
        term_width = self._console.width()
        prompt_len = len(self.prompt)
        label_width = self._line.label_width

        self._visible_area_width = term_width - prompt_len - label_width

        state = self._is_at
        state.left_end = cursor_pos == prompt_len
        state.right_end = cursor_pos == term_width - label_width
        state.line_start = state.left_end and self._overflow_left == 0
        state.line_end = (
            cursor_pos - prompt_len == len(self._line) - self._overflow_left
        ) or (state.right_end and self._overflow_right == 0)

    def _display_hint(self, scope: Scope) -> None:
        hint_text = self._candidate.next()
        if hint_text is None:
            try:
                hints = analyze(self._line.tokens, scope)
            except AnalysisError:
                return
            if hints:
                self._candidate.set(hints)
                self._display_hint(scope)
            return

        self._line.tokens.append(Token(TextType.HINT, hint_text))
        content_width = len(self._line) + len(hint_text)
        if content_width > self._visible_area_width:
            offset = content_width - self._visible_area_width
            cursor_move = offset - self._overflow_left
            if cursor_move > 0:
                self._console.cursor_left(cursor_move)
            self._overflow_left = offset
        self._render_with_fixed_pos()
        self._line.tokens.pop()

    def _hide_hint(self) -> None:
        hint_text = self._candidate.current_hint()
        if hint_text is None:
            return
        if self._overflow_left > 0:
            offset = min(self._overflow_left, len(hint_text))
            self._overflow_left -= offset
            self._console.cursor_right(offset)
        self._candidate.clear()
        self._render_with_fixed_pos()

    def _styled(self, token: Token, start: int, end: int) -> str:
        if not self.support_ansi:
            return token.content
        colored = token.colored(start, end)
        if self._line.is_history:
            return f"{_DIM}{colored}{_RESET}"
        return colored

    def _render(self) -> None:
        self._console.hide_cursor()
        self._clear_line()

        offset = self._overflow_left
        remain_space = self._visible_area_width
        parts: list[str] = []
        for token in self._line.tokens:
            if remain_space <= 0:
                break
            size = len(token)
            if offset > 0:
                if offset >= size:
                    offset -= size
                    continue
                visible = size - offset
                if visible > remain_space:
                    parts.append(self._styled(token, offset, offset + remain_space))
                    break
                remain_space -= visible
                parts.append(self._styled(token, offset, size))
                offset = 0
            elif remain_space >= size:
                remain_space -= size
                parts.append(self._styled(token, 0, size))
            else:
                parts.append(self._styled(token, 0, remain_space))
                remain_space = 0

        self._console.write("".join(parts) + self._line.label)
        self._console.show_cursor()
        self._console.flush()

    def _scroll_left(self) -> None:
        if self._overflow_left > 0:
            self._overflow_left -= 1
            self._overflow_right += 1

    def _scroll_right(self) -> None:
        if self._overflow_right > 0:
            self._overflow_right -= 1
            self._overflow_left += 1

    def _insert_edit(self, ch: str) -> None:
        insert_pos = self._console.cursor_col() - len(self.prompt) + self._overflow_left
        self._line.insert(insert_pos, ch)
        if len(self._line) - 1 >= self._visible_area_width:
            self._overflow_left += 1
        else:
            self._console.cursor_right(1)

    def _remove_edit(self) -> None:
        cursor_pos = self._console.cursor_col()
        if cursor_pos == 0:
            return
        remove_pos = cursor_pos - len(self.prompt) + self._overflow_left
        if self._overflow_left > 0:
            remove_pos -= 1
            self._overflow_left -= 1
        elif self._overflow_right > 0:
            self._overflow_right -= 1
        self._line.remove(remove_pos)

    def _complete(self) -> None:
        hint_text = self._candidate.current_hint()
        if hint_text is None:
            return
        self._line.push_str(hint_text)
        self._candidate.clear()
        self._console.cursor_right(len(hint_text))
        self._render_with_fixed_pos()

    def _handle_history_key(self, key: Key) -> bool:
        """Handle history navigation; return True if the key is fully handled."""
        if key.name == "UP":
            entry = self.history.previous()
            if entry is not None:
                self._move_cursor_to_prompt()
                self._line.use_history(entry)
        elif key.name == "DOWN":
            entry = self.history.next()
            if entry is not None:
                self._move_cursor_to_prompt()
                self._line.use_history(entry)
            else:
                self._line.reset()
        elif key.name == "TAB":
            new_content = self.history.current()
            if new_content is not None:
                if len(new_content) > self._visible_area_width:
                    self._overflow_left = 0
                    self._overflow_right = len(new_content) - self._visible_area_width
                self.history.reset_index()
                self._line.reset_with(new_content)
                self._render_with_fixed_pos()
                return True
        return False

    def readline(self, scope: Scope) -> Signal:
        """Read one line, returning a NewLine, Interrupt or NonAscii signal."""
        self._display_prompt()
        self._line = self._new_line()
        console = self._console

        while True:
            key = console.get_key()
            if key is None:
                continue
            if key.ctrl and key.char in _INTERRUPT_KEYS:
                console.print_line("\nKeyboard Interrupt")
                return Interrupt()

            self._refresh()
            if self._handle_history_key(key):
                continue

            if not self._line.is_history:
                state = self._is_at
                name = key.name
                if name == "LEFT":
                    if state.line_start:
                        continue
                    if state.left_end:
                        self._scroll_left()
                    else:
                        self._hide_hint()
                        console.cursor_left(1)
                        continue
                elif name == "RIGHT":
                    if state.line_end:
                        self._complete()
                        continue
                    if state.right_end:
                        self._scroll_right()
                    else:
                        console.cursor_right(1)
                        continue
                elif name == "ENTER":
                    self.line_count += 1
                    self._overflow_left = 0
                    self._overflow_right = 0
                    console.print_line("")
                    content = self._line.content
                    self._line.content = ""
                    self.history.append(content)
                    return NewLine(content)
                elif name == "TAB":
                    if state.line_end:
                        self._display_hint(scope)
                        continue
                elif name == "BACKSPACE":
                    if state.line_start:
                        continue
                    self._hide_hint()
                    self._back_operate()
                elif name is None and key.char is not None and not key.ctrl:
                    ch = key.char
                    if not ch.isascii():
                        console.print_line("")
                        return NonAscii()
                    if state.line_end:
                        self._line.push(ch)
                        self._hide_hint()
                        self._refresh()
                        if not self._is_at.right_end:
                            console.cursor_right(1)
                        self._overflow_left = max(
                            len(self._line) - self._visible_area_width, 0
                        )
                    else:
                        self._insert_edit(ch)
            self._render_with_fixed_pos()