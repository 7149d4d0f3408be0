# tinylib

A small set of everyday helpers in plain Python. It needs only the standard library.

## Modules

- `tinylib.chars` classifies and converts single characters. Each function takes a one-character string or an integer code. The checks work on ASCII codes.
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`
  - `to_lower` and `to_upper` return the same kind of value they were given.
- `tinylib.numbers` parses and formats integers in any base. The base is given as a string of digit characters.
  - `parse_long` and `parse_long_base` skip leading whitespace and accept one sign. They stop at the first character that is not a digit. A value beyond the signed 64-bit range gives -1 when positive and 0 when negative.
  - `format_long`, `format_long_base` and `format_ulong_base` format integers.
  - `signed_length` and `unsigned_length` count the characters needed.
  - `magnitude` returns the absolute value.
  - `contains` tells whether a value occurs in an iterable.
- `tinylib.search` searches, compares and does bounded copies of strings.
  - `find_char`, `find_last_char` and `find_substring` return an index or `None`.
  - `compare` and `compare_n` return the difference of the first differing character codes.
  - `length_until` and `prefix`.
  - `bounded_copy` and `bounded_concat` return the resulting text and the length that was attempted.
- `tinylib.strings` holds whole-string helpers.
  - `split` drops empty pieces; `count_words` counts those pieces.
  - `trim`, `substr`, `join`, `surround`, `replace_range`
  - `lower`, `upper`, `is_digits`
  - `sort_strings` sorts a list in place.
  - `map_indexed` and `iter_indexed`.
- `tinylib.linked_list` provides `LinkedList`, a doubly linked list of `Node` objects.
  - `append` and `prepend` return the new node.
  - `remove(node)` returns a neighbouring node.
  - `clear(delete)`, `for_each`, `map`, `first`, `last`, `len()` and iteration.
- `tinylib.lines` reads a file descriptor one line at a time.
  - `LineReader(fd)` has `read_line()` and can be iterated.
  - `get_next_line(fd)` keeps one reader per descriptor.
  - A line keeps its newline. The end of input gives `None`.
- `tinylib.output` writes text to a file descriptor as UTF-8 and returns the number of bytes written. A failed write raises `OSError`.
  - `put_char`, `put_str`, `put_lstr`, `put_endl`, `put_nbr`, `put_nchar`
- `tinylib.printf` is a small printf. It supports `%c %s %p %d %i %u %x %X %%` and the flags `- 0 . # space +`.
  - A number right after `%` or after a space sets a right-justified width.
  - A number after `-` sets a left-justified width. A number after `0` sets a width padded with zeros.
  - A number after `.` sets the precision.
  - `render(fmt, *args)` returns the text.
  - `printf(fmt, *args)` writes it to standard output and returns the number of bytes written.
  - `parse_conversion`, `convert_signed` and `convert_unsigned` expose the parsing and number formatting. `Conversion`, `Spec` and `Flag` describe a directive.

## Installation

```
pip install .
```

## Examples

```python
from tinylib.strings import split, trim
from tinylib.numbers import format_long_base
from tinylib.printf import render
from tinylib.linked_list import LinkedList

split("  hello  world ", " ")               # ['hello', 'world']
trim("xxhixx", "x")                         # 'hi'
format_long_base(255, "0123456789abcdef")   # 'ff'
render("[%5d|%-4s]", 42, "ab")              # '[   42|ab  ]'

items = LinkedList([1, 2, 3])
items.append(4)
list(items.map(lambda x: x * 10))           # [10, 20, 30, 40]
```

Reading a file line by line:

```python
import os
from tinylib.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line, end="")
os.close(fd)
```

## What it does not do

- There are no helpers for raw byte buffers, such as filling, copying, moving, comparing or resizing `bytearray` objects. Use Python's own `bytes` and `bytearray` operations for that.
- The package has no command-line tool. It is a library only.

## Running the tests

```
pip install .[test]
pytest
```