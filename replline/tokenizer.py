"""Splitting an input line into coloured tokens for display."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from .ascii import is_identi_ascii


class TokenType(Enum):
    """Kind of the last token seen, used as tokenizer state."""

    UNKNOWN = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()
    ANNOTATION = auto()
    PAREN = auto()
    SYMBOL = auto()
    DIVIDER = auto()
    COMMENT = auto()
    NUMBER = auto()
    STRING = auto()


class TextType(Enum):
    """How a piece of text is displayed."""

    UNKNOWN = auto()
    VARIABLE = auto()
    KEYWORD = auto()
    ANNOTATION = auto()
    PAREN = auto()
    SYMBOL = auto()
    DIVIDER = auto()
    COMMENT = auto()
    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    HINT = auto()


_RESET = "\x1b[0m"
_WHITE, _DARK_RED, _DARK_CYAN, _RED = 15, 1, 6, 9
_GREEN, _YELLOW, _DARK_YELLOW = 10, 11, 3
_DIM, _UNDERLINED = 2, 4

# (foreground, background, attributes) per text type
_STYLES: dict[TextType, tuple[int | None, int | None, tuple[int, ...]]] = {
    TextType.UNKNOWN: (_WHITE, _DARK_RED, ()),
    TextType.VARIABLE: (None, None, (_UNDERLINED,)),
    TextType.KEYWORD: (_DARK_CYAN, None, ()),
    TextType.ANNOTATION: (_RED, None, ()),
    TextType.PAREN: (_WHITE, None, ()),
    TextType.SYMBOL: (_WHITE, None, ()),
    TextType.DIVIDER: (None, None, (_DIM,)),
    TextType.COMMENT: (_GREEN, None, (_DIM,)),
    TextType.NUMBER_LITERAL: (_YELLOW, None, ()),
    TextType.STRING_LITERAL: (_DARK_YELLOW, None, ()),
    TextType.HINT: (None, None, (_DIM,)),
}


def _styled(text: str, fg: int | None, bg: int | None, attrs: tuple[int, ...]) -> str:
    codes = []
    if fg is not None:
        codes.append(f"\x1b[38;5;{fg}m")
    if bg is not None:
        codes.append(f"\x1b[48;5;{bg}m")
    codes.extend(f"\x1b[{attr}m" for attr in attrs)
    if not codes:
        return text
    return "".join(codes) + text + _RESET


@dataclass
class Token:
    """A piece of the line with its display type."""

    type: TextType
    content: str

    def __len__(self) -> int:
        return len(self.content)

    def colored(self, start: int, end: int) -> str:
        """Return characters ``start`` to ``end`` wrapped in the ANSI style of this token."""
        if not 0 <= start <= end <= len(self.content):
            raise IndexError(
                f"range {start}..{end} out of bounds for token of length {len(self.content)}"
            )
        fg, bg, attrs = _STYLES[self.type]
        return _styled(self.content[start:end], fg, bg, attrs)


_NUMBER = re.compile(r"[0-9][0-9.]*")
_IDENT_TAIL = re.compile(r"(?:[A-Za-z_0-9]|[^\x00-\x7f])*")
_STRING = re.compile(r"""['"](?:\\.|[^'"\\])*(?:['"]|\\\Z)?""", re.DOTALL)

_PARENS = frozenset("()[]{}")
_SYMBOLS = frozenset("+-*/%^!<>=.&|")
_DIVIDERS = frozenset("\\,;:")
_LITERAL_KEYWORDS = frozenset({"true", "false"})


def tokenize(source: str, keywords: Iterable[str] = ()) -> list[Token]:
    """Split ``source`` into display tokens.

    ``keywords`` are the words shown as keywords besides ``true`` and ``false``.
    Everything from ``#`` on is one comment token at the end.
    """
    keyword_set = _LITERAL_KEYWORDS.union(keywords)
    tokens: list[Token] = []
    last_type = TokenType.UNKNOWN
    pos = 0
    while pos < len(source):
        ch = source[pos]

        if "0" <= ch <= "9":
            match = _NUMBER.match(source, pos)
            last_type = TokenType.NUMBER
            tokens.append(Token(TextType.NUMBER_LITERAL, match.group()))
            pos = match.end()
            continue

        if is_identi_ascii(ch):
            match = _IDENT_TAIL.match(source, pos + 1)
            value = source[pos:match.end()]
            pos = match.end()
            if last_type is TokenType.ANNOTATION:
                tokens.append(Token(TextType.ANNOTATION, value))
            elif value in keyword_set:
                last_type = TokenType.KEYWORD
                tokens.append(Token(TextType.KEYWORD, value))
            else:
                last_type = TokenType.IDENTIFIER
                tokens.append(Token(TextType.VARIABLE, value))
            continue

        if ch in "'\"":
            match = _STRING.match(source, pos)
            last_type = TokenType.STRING
            tokens.append(Token(TextType.STRING_LITERAL, match.group()))
            pos = match.end()
            continue

        if ch == "#":
            tokens.append(Token(TextType.COMMENT, source[pos:]))
            break

        if ch in _PARENS:
            last_type = TokenType.PAREN
            tokens.append(Token(TextType.PAREN, ch))
        elif ch in _SYMBOLS:
            last_type = TokenType.SYMBOL
            tokens.append(Token(TextType.SYMBOL, ch))
        elif ch in _DIVIDERS:
            last_type = TokenType.DIVIDER
            tokens.append(Token(TextType.DIVIDER, ch))
        elif ch == "$":
            last_type = TokenType.ANNOTATION
            tokens.append(Token(TextType.ANNOTATION, ch))
        elif ch == " ":
            tokens.append(Token(TextType.DIVIDER, ch))
        else:
            last_type = TokenType.UNKNOWN
            tokens.append(Token(TextType.UNKNOWN, ch))
        pos += 1
    return tokens