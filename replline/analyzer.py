"""Finding completion candidates for the end of a tokenized line."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .completer import Completer
from .tokenizer import TextType, Token


class AnalysisError(Exception):
    """The end of the line cannot be resolved to something completable."""


@runtime_checkable
class ObjectValue(Protocol):
    """A value with named properties and an optional completer for them."""

    def get(self, name: str) -> Any: ...

    def get_completer(self) -> Completer | None: ...


class Scope(Protocol):
    """Variables visible to the line, with a completer for their names."""

    completer: Completer | None

    def read_var(self, name: str) -> Any: ...


def get_end_part(tokens: list[Token]) -> list[str] | None:
    """Return the trailing ``a.b.c`` chain of names, innermost first.

    ``var = obj.prop`` gives ``["prop", "obj"]``. Returns None when the line
    is empty, ends with ``.`` or ends with no name.
    """
    if not tokens or tokens[-1].content == ".":
        return None

    names: list[str] = []
    last_type = TextType.COMMENT
    for token in reversed(tokens):
        if token.type is last_type:
            break
        if token.type is TextType.VARIABLE:
            names.append(token.content)
        elif not (token.type is TextType.SYMBOL and token.content == "."):
            break
        last_type = token.type
    return names or None


def _as_object(value: Any) -> ObjectValue:
    if not isinstance(value, ObjectValue):
        raise AnalysisError(f"{value!r} has no properties")
    return value


def analyze(tokens: list[Token], scope: Scope) -> list[str]:
    """Return the completions for the name at the end of ``tokens``."""
    end_part = get_end_part(tokens)
    if end_part is None:
        return []

    if len(end_part) == 1:
        if scope.completer is None:
            raise AnalysisError("scope has no completer")
        return scope.completer.complete(end_part[0])

    obj_name = end_part.pop()
    try:
        obj = _as_object(scope.read_var(obj_name))
        while len(end_part) > 1:
            obj = _as_object(obj.get(end_part.pop()))
    except LookupError as err:
        raise AnalysisError(str(err)) from err

    completer = obj.get_completer()
    if completer is None:
        raise AnalysisError("object has no completer")
    return completer.complete(end_part[0])