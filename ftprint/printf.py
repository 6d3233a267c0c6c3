"""A small printf: %c %s %d %i %u %x %X %p and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from ftprint.chars import itoa
from ftprint.strings import strlen

CONVERSIONS = "cspdiuxX%"

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def format_char(c: Union[int, str]) -> str:
    """One character; an integer is taken as a code truncated to 8 bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c, "%c") & 0xFF)


def format_str(s: Optional[str]) -> str:
    """The string up to its first NUL, or ``(null)`` for ``None``."""
    if s is None:
        return _NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"%s expects a str, got {type(s).__name__}")
    return s[: strlen(s)]


def format_int(n: int) -> str:
    """A signed 32-bit integer in decimal."""
    return itoa(_require_int(n, "%d"))


def format_hex(n: int, conversion: str) -> str:
    """An unsigned 32-bit integer in hexadecimal; lower case for ``x``, upper otherwise."""
    text = format(_require_int(n, "%x") & _UINT_MASK, "x")
    return text if conversion == "x" else text.upper()


def format_pointer(address: Optional[int]) -> str:
    """An address as ``0x`` and lower-case hex, or ``(nil)`` for a null address."""
    if address is None:
        return _NULL_POINTER
    value = _require_int(address, "%p") & _ULONG_MASK
    if value == 0:
        return _NULL_POINTER
    return f"0x{value:x}"


def format_unsigned(n: int) -> str:
    """An unsigned 32-bit integer in decimal."""
    return str(_require_int(n, "%u") & _UINT_MASK)


def format_conversion(conversion: str, args: Iterator[Any]) -> str:
    """Render one conversion, taking its argument from the iterator ``args``.

    Raises ``ValueError`` for an unknown conversion and ``TypeError`` when
    no argument is left.
    """
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX" or len(conversion) != 1:
        raise ValueError(f"unknown conversion {conversion!r}")
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return format_char(value)
    if conversion == "s":
        return format_str(value)
    if conversion in "di":
        return format_int(value)
    if conversion in "xX":
        return format_hex(value, conversion)
    if conversion == "p":
        return format_pointer(value)
    return format_unsigned(value)


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    A ``%`` not followed by a known conversion is copied as it is; a ``%``
    at the very end of the format is an error. Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with an incomplete conversion")
        if conversion in CONVERSIONS:
            pieces.append(format_conversion(conversion, remaining))
        else:
            pieces.append("%")
            pieces.append(conversion)
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default) and return its length."""
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)


def main(argv: Optional[list] = None) -> int:
    """Print a short demonstration of every conversion."""
    nb2 = -5
    total = printf(
        "Resultat de la fonction : [%c] [%d] [%s] [%s] [%x] [%X] [%u]\n",
        55, -2147483648, "Salut les amis", None, 2147483647, 2147483647, -2,
    )
    print(f"Total : {total}")
    total = printf("Resultat de la fonction : [%p] [%p] [%p]\n", id(nb2), None, None)
    print(f"Total : {total}")
    try:
        result = printf(None)
    except TypeError:
        result = -1
    print(f"Resultat de ft_printf : {result}")
    printf("%s\n", "%")
    return 0