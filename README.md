# cubutils

A small library of text and data helpers with C-library-like semantics,
working on plain Python values: strings, `bytearray` buffers and streams.

## Installation

```
pip install cubutils
```

The test suite uses pytest, available through the `test` extra:

```
pip install "cubutils[test]"
```

## Modules

### `cubutils.chars`

ASCII classification and case mapping. Each function takes a one-character
string or an integer code.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`
  return a `bool`.
- `to_upper`, `to_lower` change only ASCII letters and return a value of the
  same kind they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `cubutils.memory`

Operations on byte buffers. Lengths that are negative or larger than a
buffer raise `ValueError`.

- `memset(buf, value, n)`, `bzero(buf, n)`: fill the first `n` bytes.
- `memcpy(dest, src, n)`, `memmove(dest, src, n)`: copy `n` bytes into `dest`.
- `memchr(buf, value, n)`: index of the first matching byte, or `None`.
- `memcmp(a, b, n)`: difference of the first differing bytes, or `0`.
- `calloc(count, size)`: a zero-filled `bytearray`; raises `MemoryError`
  when the size would overflow.
- `realloc(buf, new_size)`: a new zero-filled `bytearray` holding the start
  of `buf`; a size of `0` gives `None`.

### `cubutils.strings`

Bounded string search, comparison and copying. Searches return an index or
`None`.

- `strchr`, `strrchr`: first / last occurrence of a character; searching for
  the NUL character gives the length of the string.
- `strncmp(s1, s2, n)`: compares at most `n` characters.
- `strnrcmp(s1, s2, n)`: compares at most `n` characters from the ends;
  gives `1` when `s2` is longer than `s1` or `n` is `0`.
- `strnstr(big, little, length)`: finds `little` within the first `length`
  characters of `big`.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a `Bounded`
  named tuple `(value, wanted)`: the truncated result and the length it
  would have had without the limit.
- `strncpy(src, n)`: exactly `n` characters, padded with NUL characters.
- `strndup(s, n)`: at most the first `n` characters.

### `cubutils.text`

- `atoi(s)`: parses a leading decimal integer after whitespace and an
  optional sign; wraps to 32 bits, and gives `-1` once the value has run past
  the 32-bit maximum.
- `itoa(n)`, `strjoin(s1, s2)`, `substr(s, start, length)`.
- `split(s, sep)`: words separated by one character, empty words dropped.
- `strtrim(s, charset)`: strips characters of `charset` from both ends.
- `strmapi(s, func)`: builds a string from `func(index, char)`.
- `striteri(seq, func)`: calls `func(index, item)` on a mutable sequence and
  stores any non-`None` return value back in place.
- `skip_prefix(program)`: index just past the first `/`, or `0`.
- `check_extension(program, file, ext)`: raises `ExtensionError` (a
  `ValueError`) with a message such as `"prog only accepts .cub files"` when
  `file` does not end with `ext`.

### `cubutils.formatting`

A minimal printf family supporting `%c %s %p %d %i %u %x %X %%`. A `%`
followed by any other character is dropped and that character is output as
plain text. `%s` with `None` prints `(null)`, `%p` with `None` or `0` prints
`(nil)`.

- `format_string(fmt, *args)`: returns the rendered text.
- `printf(fmt, *args)`, `eprintf(fmt, *args)`: write to standard output /
  standard error and return the number of characters written.
- `itoa_base(num, base)`: digits of a non-negative number; a negative base
  selects lower-case digits.
- `put_char`, `put_str`, `put_endl`, `put_nbr`: write to a stream, standard
  output by default.

### `cubutils.linereader`

`LineReader(stream, buffer_size=4096)` reads a text or binary stream in
chunks of `buffer_size` and returns one line at a time with its newline kept.
`read_line()` returns `None` when the stream is exhausted; iterating over the
reader yields every remaining line.

### `cubutils.linked_list`

`LinkedList(items=None)` is a singly linked list of `Node` objects with
`push_front`, `push_back`, `last`, `clear(release=None)`, `for_each(func)`
and `map(func, release=None)`, plus `len()` and iteration over the stored
values. If `func` raises during `map`, the values already produced are passed
to `release` and the exception propagates.

## Examples

```python
from cubutils.text import split, atoi
from cubutils.formatting import format_string
from cubutils.linereader import LineReader

split("  a  b c ", " ")                 # ['a', 'b', 'c']
atoi("  -42abc")                        # -42
format_string("%d%% of %s", 50, "map")  # '50% of map'

with open("maps/map.cub", "rb") as fh:
    for line in LineReader(fh, 4096):
        ...
```

## What this package does not do

It is a helper library only. It has no command-line program, does not parse
or validate map files, and draws nothing on screen; it offers the building
blocks (line reading, splitting, number parsing, extension checks) that such
a program would use.