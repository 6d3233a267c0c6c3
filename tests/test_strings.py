import pytest

from ftprint.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_plain_string():
    assert strlen("tototototo") == len("tototototo")


def test_strlen_stops_at_nul():
    assert strlen(b"abc\0def") == len(b"abc")
    assert strlen("abc\0def") == len("abc")


def test_strlcpy_truncates_and_returns_source_length():
    dest = bytearray(100)
    result = strlcpy(dest, b"Hello World", 5)
    assert result == len(b"Hello World")
    assert dest[:5] == b"Hell\0"


def test_strlcpy_full_copy():
    dest = bytearray(20)
    assert strlcpy(dest, b"Hello", 20) == len(b"Hello")
    assert dest[: strlen(dest)] == b"Hello"


def test_strlcpy_size_zero_leaves_dest():
    dest = bytearray(b"xyz")
    assert strlcpy(dest, b"abc", 0) == 3
    assert dest == bytearray(b"xyz")


def test_strlcpy_size_beyond_buffer_raises():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abc", 10)


def test_strlcat_appends():
    dest = bytearray(b"ab" + bytes(8))
    result = strlcat(dest, b"cd", 10)
    assert result == len(b"ab") + len(b"cd")
    assert dest[: strlen(dest)] == b"abcd"


def test_strlcat_truncates():
    dest = bytearray(b"ab" + bytes(8))
    result = strlcat(dest, b"cdefgh", 5)
    assert result == len(b"ab") + len(b"cdefgh")
    assert strlen(dest) == 4
    assert dest[:4] == b"abcd"


def test_strlcat_size_not_above_dest_length():
    dest = bytearray(b"abc\0")
    assert strlcat(dest, b"123", 2) == len(b"123") + 2
    assert dest == bytearray(b"abc\0")


def test_strlcat_missing_buffers_with_zero_size():
    assert strlcat(None, b"123", 0) == 0
    assert strlcat(bytearray(1), None, 0) == 0


def test_strchr_finds_first():
    s = "hello world"
    index = strchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[:index]


def test_strchr_nul_gives_end():
    assert strchr("hello world", "\0") == len("hello world")


def test_strchr_missing_and_code():
    assert strchr("hello", "z") is None
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strrchr_finds_last():
    s = "hello world"
    index = strrchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[index + 1 :]
    assert strrchr(s, "\0") == len(s)
    assert strrchr(s, "q") is None


def test_strncmp_cases():
    assert strncmp("helo world", "hello wzrd", 9) > 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("x", "y", 0) == 0
    assert strncmp("a", "b", 1) == ord("a") - ord("b")


def test_strnstr_bounded():
    assert strnstr("aaabcabcd", "abcd", 2) is None
    assert strnstr("aaabcabcd", "abcd", 8) is None
    assert strnstr("aaabcabcd", "abcd", 9) == 5


def test_strnstr_empty_needle_and_missing_haystack():
    assert strnstr("abc", "", 0) == 0
    assert strnstr(None, "abc", 0) is None


def test_strdup_copies():
    assert strdup("Hello world") == "Hello world"
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_example():
    s = "Hello world_ bonjour tout le monde"
    assert substr(s, 5, 10) == " world_ bo"


def test_substr_edges():
    assert substr(None, 0, 3) is None
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 1, 0) == ""
    assert substr("hello", 2, 100) == "hello"[2:]


def test_substr_start_checked_against_low_byte_of_length():
    s = "a" * 300
    assert substr(s, 50, 5) == ""
    assert substr(s, 10, 5) == "aaaaa"


def test_strjoin():
    assert strjoin("", "to") == "to"
    assert strjoin(None, None) == ""
    assert strjoin("ab", None) == "ab"
    assert strjoin(None, "cd") == "cd"
    joined = strjoin("ab", "cd")
    assert joined.startswith("ab") and joined.endswith("cd")
    assert len(joined) == len("ab") + len("cd")


def test_strtrim():
    assert strtrim("   xxx   xxx", " x") == ""
    assert strtrim("  hi there  ", " ") == "hi there"
    assert strtrim(None, " ") == ""
    assert strtrim("  a  ", None) == "  a  "
    assert strtrim("  a  ", "") == "  a  "


def test_split():
    assert split(" tripouille", " ") == ["tripouille"]
    assert split("", " ") == []
    assert split(None, " ") == []
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]


def test_split_pieces_have_no_separator():
    s = ",,one,,two,three,,"
    pieces = split(s, ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert "".join(pieces) == s.replace(",", "")


def test_strmapi_alternating_case():
    def alternate(i, c):
        return c.upper() if i % 2 == 0 else c.lower()

    assert strmapi("Hello World", alternate) == "HeLlO WoRlD"
    assert strmapi(None, alternate) == ""


def test_strmapi_passes_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    assert strmapi("abcd", record) == "abcd"
    assert seen == list(range(4))


def test_striteri_in_place():
    buffer = list("0000000000")
    striteri(buffer, lambda i, c: chr(ord(c) + i))
    assert "".join(buffer) == "0123456789"


def test_striteri_bytearray():
    buffer = bytearray(b"aaa")
    striteri(buffer, lambda i, b: b + i)
    assert buffer == bytearray(b"abc")