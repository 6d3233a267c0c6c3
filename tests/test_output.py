import io

import pytest

from ftprint.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def stream():
    return io.StringIO()


def test_putchar_writes_character(stream):
    putchar_fd("2", stream)
    assert stream.getvalue() == "2"


def test_putchar_accepts_code(stream):
    putchar_fd(ord("A"), stream)
    assert stream.getvalue() == "A"


def test_putchar_rejects_long_string(stream):
    with pytest.raises(ValueError):
        putchar_fd("ab", stream)


def test_putchar_rejects_other_types(stream):
    with pytest.raises(TypeError):
        putchar_fd(1.5, stream)


def test_putstr_writes_text(stream):
    putstr_fd("hello word", stream)
    assert stream.getvalue() == "hello word"


def test_putstr_none_writes_nothing(stream):
    putstr_fd(None, stream)
    assert stream.getvalue() == ""


def test_putstr_stops_at_nul(stream):
    putstr_fd("abc\0def", stream)
    assert stream.getvalue() == "abc"


def test_putendl_appends_newline(stream):
    putendl_fd("hello world", stream)
    putstr_fd("MIAOU", stream)
    assert stream.getvalue() == "hello world\nMIAOU"


def test_putendl_none_writes_nothing(stream):
    putendl_fd(None, stream)
    assert stream.getvalue() == ""


def test_putnbr_int_min(stream):
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_putnbr_zero(stream):
    putnbr_fd(0, stream)
    assert stream.getvalue() == "0"


@pytest.mark.parametrize("n", [1, 9, 10, -5, 2564, 27647, 2147483647, -2147483647])
def test_putnbr_matches_decimal(stream, n):
    putnbr_fd(n, stream)
    assert stream.getvalue() == str(n)
    assert int(stream.getvalue()) == n


def test_putnbr_wraps_to_32_bits(stream):
    putnbr_fd(2147483648, stream)
    assert stream.getvalue() == "-2147483648"