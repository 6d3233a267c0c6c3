"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO, Union

from ftprint.chars import itoa
from ftprint.strings import strlen

CharLike = Union[int, str]


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_as_char(c))


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` up to its first NUL to ``stream``; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s[: strlen(s)])


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing at all."""
    if s is None:
        return
    putstr_fd(s, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write a signed 32-bit integer in decimal to ``stream``."""
    stream.write(itoa(n))