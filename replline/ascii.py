"""Character classification helpers used by the line tokenizer."""

_DIGIT_ZERO = ord("0")


def is_identi_ascii(ch: str) -> bool:
    """Return True if ``ch`` may start an identifier: ``[a-zA-Z_]`` or any non-ASCII."""
    return (ch.isascii() and ch.isalpha()) or ch == "_" or not ch.isascii()


def ascii_to_num(ch: str) -> int:
    """Convert a digit character to its value, e.g. ``'1'`` gives ``1``.

    The character's code is taken as a byte. A code below ``'0'`` cannot be
    converted and raises ``ValueError``.
    """
    code = ord(ch) & 0xFF
    if code < _DIGIT_ZERO:
        raise ValueError(f"character {ch!r} lies below '0' and has no digit value")
    return code - _DIGIT_ZERO