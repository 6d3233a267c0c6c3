"""String helpers with C-string semantics: length, bounded copy, search, slicing and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

ByteString = Union[bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return a one-character string for a character or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def strlen(s: Union[str, ByteString]) -> int:
    """Length of ``s`` up to, not including, its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        end = bytes(s).find(b"\0")
    return len(s) if end < 0 else end


def _check_capacity(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")


def strlcpy(dest: bytearray, src: ByteString, size: int) -> int:
    """Copy the C string ``src`` into ``dest``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``; a result of ``size`` or more means truncation.
    """
    _check_capacity(dest, size)
    source = bytes(src)[: strlen(src)]
    if size > 0:
        count = min(len(source), size - 1)
        dest[:count] = source[:count]
        dest[count] = 0
    return len(source)


def strlcat(dest: Optional[bytearray], src: Optional[ByteString], size: int) -> int:
    """Append the C string ``src`` to the C string in ``dest``, bounded by ``size``.

    Returns the length the full result would have had. When ``size`` is not
    larger than the current length of ``dest``, nothing is written and the
    length of ``src`` plus ``size`` is returned.
    """
    if (dest is None or src is None) and size == 0:
        return 0
    if dest is None or src is None:
        raise TypeError("dest and src are required when size is not zero")
    dest_len = strlen(dest)
    source = bytes(src)[: strlen(src)]
    if size <= dest_len:
        return len(source) + size
    _check_capacity(dest, size)
    count = min(len(source), size - 1 - dest_len)
    dest[dest_len : dest_len + count] = source[:count]
    dest[dest_len + count] = 0
    return dest_len + len(source)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL gives the index just past the end of ``s``.
    """
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL gives the index just past the end of ``s``.
    """
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first unequal codes, or 0.

    A string that ends early compares as if followed by NUL.
    """
    for i in range(n):
        a = first[i] if i < len(first) else "\0"
        b = second[i] if i < len(second) else "\0"
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(haystack: Optional[str], needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters, or ``None``.

    An empty needle matches at index 0.
    """
    if needle == "":
        return None if haystack is None else 0
    if haystack is None:
        if n == 0:
            return None
        raise TypeError("haystack is required when n is not zero")
    index = haystack.find(needle, 0, max(n, 0))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return str(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; ``None`` when ``s`` is ``None``.

    The start is compared against the length of ``s`` reduced to its low
    eight bits, so a start past that value gives an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= (len(s) & 0xFF) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a missing one counts as empty."""
    return (first or "") + (second or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> str:
    """Strip characters in ``charset`` from both ends of ``s``."""
    if s is None:
        return ""
    if charset is None:
        return s
    return s.strip(charset)


def split(s: Optional[str], sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    if s is None:
        return []
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    if s is None:
        return ""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(buffer: Optional[MutableSequence], func: Callable[[int, object], object]) -> None:
    """Replace each element of ``buffer`` in place with ``func(index, element)``."""
    if buffer is None:
        return
    for i, item in enumerate(buffer):
        buffer[i] = func(i, item)