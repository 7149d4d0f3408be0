"""Writing characters, strings and numbers to file descriptors.

Text is encoded as UTF-8. Every function returns the number of bytes written
and lets the OSError of a failed write propagate.
"""

from __future__ import annotations

import os
from typing import Union

from tinylib.numbers import format_long

Text = Union[str, bytes]


def _encode(s: Text) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    written = 0
    while written < len(view):
        written += os.write(fd, view[written:])
    return written


def put_str(s: Text, fd: int) -> int:
    """Write ``s`` to ``fd``."""
    return _write_all(fd, _encode(s))


def put_char(c: Text, fd: int) -> int:
    """Write a single character to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return put_str(c, fd)


def put_endl(s: Text, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``."""
    return put_str(s, fd) + put_str("\n", fd)


def put_lstr(s: Text, fd: int, n: int) -> int:
    """Write the first ``n`` bytes of ``s`` to ``fd``."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    data = _encode(s)
    if n > len(data):
        raise IndexError(f"cannot write {n} bytes from {len(data)}")
    return _write_all(fd, data[:n])


def put_nbr(n: int, fd: int) -> int:
    """Write ``n`` in decimal to ``fd``."""
    return put_str(format_long(n), fd)


def put_nchar(c: Text, fd: int, n: int) -> int:
    """Write the character ``c`` to ``fd`` ``n`` times."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if n < 0:
        raise ValueError(f"repeat count must not be negative, got {n}")
    return _write_all(fd, _encode(c) * n)