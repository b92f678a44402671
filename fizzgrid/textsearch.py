"""Searching, comparing and size-bounded copying of strings.

Strings behave as if terminated by a NUL character: searching for ``"\\0"``
finds the position just past the end, and comparisons treat the end of the
shorter string as a NUL.
"""

from __future__ import annotations

from typing import Optional, Tuple

_NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def length(text: str) -> int:
    """Number of characters before the first NUL, or the whole length."""
    end = text.find(_NUL)
    return len(text) if end < 0 else end


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL yields the index of the terminator.
    """
    char = _single(char)
    text = text[:length(text)]
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL yields the index of the terminator.
    """
    char = _single(char)
    text = text[:length(text)]
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference of the first pair that differs, or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if not needle:
        return 0
    index = haystack[:length(haystack)][:limit].find(needle)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``; a result shorter
    than that length means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src = src[:length(src)]
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills the buffer nothing is appended and
    the length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst = dst[:length(dst)]
    src = src[:length(src)]
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)