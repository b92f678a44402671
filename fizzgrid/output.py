"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from fizzgrid.transform import int_to_str


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` as is."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _target(stream).write(s)


def put_line(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    put_str(s, stream)
    _target(stream).write("\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal."""
    _target(stream).write(int_to_str(n))