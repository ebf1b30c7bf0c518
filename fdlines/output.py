"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character c to stream (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s to stream; a missing string writes nothing."""
    if s is not None:
        _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))


def print_words(words: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Write each word on a line of its own."""
    out = _target(stream)
    for word in words:
        put_endl(word, out)