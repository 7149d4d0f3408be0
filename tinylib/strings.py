"""Splitting, joining, trimming, case mapping and other whole-string helpers.

Separator characters may be given as one-character strings or as integer
codes; an integer code is reduced to its low byte.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Union

from tinylib.chars import is_digit, to_lower, to_upper

Char = Union[str, int]


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


def sort_strings(strings: list[str]) -> None:
    """Sort ``strings`` in place by character code, shorter prefixes first."""
    strings.sort()


def split(s: str, c: Char) -> list[str]:
    """Split ``s`` on the separator ``c``, dropping empty pieces."""
    sep = _char(c)
    return [word for word in s.split(sep) if word]


def count_words(s: str, c: Char) -> int:
    """Count the non-empty runs of ``s`` between separators ``c``."""
    return len(split(s, c))


def surround(s: str, c: Char) -> str:
    """Return ``s`` with ``c`` added at both ends."""
    ch = _char(c)
    return f"{ch}{s}{ch}"


def is_digits(s: str) -> bool:
    """True when ``s``, after one optional leading ``-``, holds only decimal digits.

    The empty string and a lone ``-`` count as digits.
    """
    body = s[1:] if s.startswith("-") else s
    return all(is_digit(ch) for ch in body)


def iter_indexed(s: str, func: Callable[[int, str], Any]) -> None:
    """Call ``func(index, char)`` for every character of ``s``."""
    for index, ch in enumerate(s):
        func(index, ch)


def join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character of ``s``.

    ``func`` must return a single character.
    """
    out = []
    for index, ch in enumerate(s):
        mapped = func(index, ch)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(f"mapping must give a single character, got {mapped!r}")
        out.append(mapped)
    return "".join(out)


def replace_range(s1: str, s2: str, start: int, length: int) -> str:
    """Return ``s1`` with the ``length`` characters at ``start`` replaced by ``s2``."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start + length > len(s1):
        raise IndexError(
            f"range {start}..{start + length} lies outside a string of {len(s1)} characters"
        )
    return s1[:start] + s2 + s1[start + length :]


def lower(s: str) -> str:
    """Return ``s`` with ASCII uppercase letters made lowercase."""
    return "".join(to_lower(ch) for ch in s)


def upper(s: str) -> str:
    """Return ``s`` with ASCII lowercase letters made uppercase."""
    return "".join(to_upper(ch) for ch in s)


def trim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    if not isinstance(chars, str):
        raise TypeError(f"expected a string of characters, got {type(chars).__name__}")
    return s.strip(chars)


def substr(s: str, start: int, n: int) -> str:
    """Return at most ``n`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_count(start, "start")
    _check_count(n, "length")
    if start >= len(s):
        return ""
    return s[start : start + n]