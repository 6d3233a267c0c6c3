# ftprint

A small printf-style formatter. It comes with helpers for characters, byte
buffers, strings, output streams and singly linked lists. Each helper follows
the behaviour of the matching C library function.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Formatting

`ftprint.printf` supports these conversions: `%c`, `%s`, `%d`, `%i`, `%u`,
`%x`, `%X`, `%p` and `%%`.

```python
from ftprint.printf import printf, sprintf

text = sprintf("[%c] [%d] [%s] [%x] [%X] [%u]", "7", -42, "hi", 255, 255, -2)
# '[7] [-42] [hi] [ff] [FF] [4294967294]'

sprintf("%s %p", None, None)
# '(null) (nil)'

count = printf("value: %d\n", 12)   # writes to stdout, returns 10
```

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, file=None)` writes the formatted text to `file`, or to
  standard output when `file` is not given. It returns the number of characters
  written.

How each conversion reads its argument:

- `%c` takes a one-character string, or an integer code truncated to 8 bits.
- `%s` prints the string up to its first NUL. It prints `(null)` for `None`.
- `%d` and `%i` read a signed 32-bit integer.
- `%u`, `%x` and `%X` read an unsigned 32-bit integer.
- `%p` prints an integer address as `0x` followed by lower-case hex. It prints
  `(nil)` for `None` or zero.

Errors and other cases:

- A `%` followed by any other character is copied unchanged.
- A `%` at the very end of the format raises `ValueError`.
- A conversion with no argument left raises `TypeError`.
- A `None` format raises `TypeError`.
- Extra arguments are ignored.

You can also call the converters directly:

- `format_char`
- `format_str`
- `format_int`
- `format_hex(n, conversion)`
- `format_unsigned`
- `format_pointer`
- `format_conversion(conversion, args)`, which takes its value from an iterator.

## Helper modules

### `ftprint.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` take a character or an integer code.
- `to_lower` and `to_upper` return the same kind of value they were given.
- `atoi` parses a leading integer the way C does and wraps the result to 32 bits.
- `itoa` renders a signed 32-bit integer as text.

### `ftprint.memory`

These functions work on `bytearray` or `memoryview` buffers:

- `memset`
- `bzero`
- `memcpy`
- `memmove`
- `memchr`, which returns an index or `None`.
- `memcmp`
- `calloc`, which returns a zeroed `bytearray`.

A count larger than a buffer raises `ValueError`.

### `ftprint.strings`

String helpers with C-string semantics:

- `strlen` counts up to the first NUL.
- `strlcpy` and `strlcat` work on `bytearray` buffers.
- `strchr`, `strrchr` and `strnstr` return indices or `None`.
- `strncmp`
- `strdup`
- `substr`
- `strjoin`
- `strtrim`
- `split` drops empty pieces.
- `strmapi`
- `striteri` updates a mutable sequence in place.

### `ftprint.output`

These functions write to any text stream:

- `putchar_fd`
- `putstr_fd`
- `putendl_fd`
- `putnbr_fd`

### `ftprint.linked`

`Node` and `LinkedList`. A `LinkedList` supports:

- `push_front` and `push_back`
- `len()` and iteration
- `last`
- `pop_front`
- `clear`
- `for_each`
- `map`, which clears the partial result with the delete callback if the function raises.

```python
from ftprint.linked import LinkedList
from ftprint.strings import split

words = LinkedList(split("  a  b c ", " "))
list(words.map(str.upper, lambda _: None))   # ['A', 'B', 'C']
```

## Command line

```
ftprint
```

This prints a few sample lines through the formatter. After each line it
prints the number of characters written. The command takes no options.

## What it does not do

The formatter does not handle flags, field widths, precision or length
modifiers. Only the conversions listed above are recognised.