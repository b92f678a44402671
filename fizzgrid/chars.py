"""Classification and case conversion of single ASCII characters.

Every function accepts either an integer code point or a one-character
string. The conversions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return _same_kind(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return _same_kind(c, code)