"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_TEXT = "(null)"


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_hex(value: int, digits: str) -> str:
    pieces = []
    while True:
        value, remainder = divmod(value, 16)
        pieces.append(digits[remainder])
        if value == 0:
            break
    return "".join(reversed(pieces))


def _next_argument(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _require_int(value, "p") & _POINTER_MASK
    return "0x" + _to_hex(address, _HEX_LOWER)


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _format_char(_next_argument(arguments))
    if spec == "s":
        return _format_str(_next_argument(arguments))
    if spec in ("d", "i"):
        return str(_to_int32(_require_int(_next_argument(arguments), spec)))
    if spec == "u":
        return str(_require_int(_next_argument(arguments), spec) & _UINT32_MASK)
    if spec == "x":
        value = _require_int(_next_argument(arguments), spec) & _UINT32_MASK
        return _to_hex(value, _HEX_LOWER)
    if spec == "X":
        value = _require_int(_next_argument(arguments), spec) & _UINT32_MASK
        return _to_hex(value, _HEX_UPPER)
    if spec == "p":
        return _format_pointer(_next_argument(arguments))
    raise ValueError(f"unsupported conversion %{spec}")


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    A ``%`` at the very end of ``fmt`` produces nothing. Integers are taken
    as 32-bit values, as the conversions describe; extra arguments are
    ignored.
    """
    if fmt is None:
        return ""
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def print_formatted(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)