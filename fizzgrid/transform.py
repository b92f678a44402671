"""Conversions between strings and integers, and string construction helpers."""

from __future__ import annotations

from typing import Callable, List, Optional

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one ``+`` or ``-`` sign is accepted, and
    digits are read until the first non-digit. A ``+`` directly followed by
    ``-`` is not a sign, so such input yields 0. No digits yields 0.
    """
    text = _require_str(text, "text")
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped.startswith("+") and not stripped.startswith("+-"):
        stripped = stripped[1:]
    if stripped.startswith("-"):
        sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def int_to_str(n: int) -> str:
    """Decimal representation of ``n``, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    text = _require_str(text, "text")
    sep = _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def join(s1: str, s2: str) -> str:
    """The concatenation of ``s1`` and ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def trim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    text = _require_str(text, "text")
    charset = _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    text = _require_str(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character."""
    text = _require_str(text, "text")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iterate_indexed(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on each character in order.

    When ``func`` returns a string, it replaces that character in the
    result; when it returns None, the character is kept.
    """
    text = _require_str(text, "text")
    pieces = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)