"""Searching, comparing and bounded copying of strings.

Characters may be given as one-character strings or as integer codes; an
integer code is reduced to its low byte. The NUL character (code 0) stands
for the end of the string, so searching for it finds the string's length.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def find_char(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def find_last_char(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL gives ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def find_substring(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly within the first ``n``
    characters of ``haystack``, or None.

    An empty needle is found at index 0 whatever ``n`` is.
    """
    _check_count(n, "search length")
    if not needle:
        return 0
    if n == 0:
        return None
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def compare(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns zero when equal, otherwise the difference between the codes of
    the first differing characters; the end of a string counts as code 0.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings, as :func:`compare`."""
    _check_count(n, "comparison length")
    return compare(s1[:n], s2[:n])


def length_until(s: str, c: Char) -> int:
    """Return the number of characters of ``s`` before the first ``c``,
    or ``len(s)`` when ``c`` does not occur."""
    ch = _char(c)
    index = s.find(ch) if ch != _NUL else -1
    return len(s) if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters, nothing
    when ``size`` is zero) and ``len(src)``, the length that was attempted.
    """
    _check_count(size, "buffer size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters,
    terminator included.

    Returns the resulting text and the length that was attempted. When the
    buffer is no longer than ``dest``, ``dest`` is returned unchanged with
    ``size + len(src)``.
    """
    _check_count(size, "buffer size")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def prefix(s: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``s``."""
    _check_count(n, "length")
    return s[:n]