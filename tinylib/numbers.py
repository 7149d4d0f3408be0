"""Integer parsing, formatting and digit counting in arbitrary bases."""

from __future__ import annotations

from collections.abc import Iterable

_DECIMAL = "0123456789"
_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1


def magnitude(n: int) -> int:
    """Return the absolute value of ``n``."""
    return -n if n < 0 else n


def _check_base_size(base_size: int) -> None:
    if base_size < 2:
        raise ValueError(f"a base needs at least two digits, got {base_size}")


def _parse(s: str, base: str) -> int:
    rest = s.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    size = len(base)
    limit = _LONG_MAX + negative
    value = 0
    for ch in rest:
        index = base.find(ch)
        if index < 0:
            break
        value = value * size + index
        if value > limit:
            return 0 if negative else -1
    return -value if negative else value


def parse_long(s: str) -> int:
    """Parse a decimal integer the way ``atol`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A value beyond the signed 64-bit range gives -1 when positive
    and 0 when negative.
    """
    return _parse(s, _DECIMAL)


def parse_long_base(s: str, base: str) -> int:
    """Parse an integer whose digits are the characters of ``base``.

    Follows the same whitespace, sign and overflow rules as :func:`parse_long`.
    """
    return _parse(s, base)


def _digits(n: int, base: str) -> str:
    size = len(base)
    _check_base_size(size)
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, size)
        out.append(base[rem])
    return "".join(reversed(out))


def format_long(n: int) -> str:
    """Format ``n`` in decimal."""
    return format_long_base(n, _DECIMAL)


def format_long_base(n: int, base: str) -> str:
    """Format ``n`` using the characters of ``base`` as digits.

    Zero is always written as ``"0"``; negatives get a leading ``-``.
    """
    digits = _digits(magnitude(n), base)
    return "-" + digits if n < 0 else digits


def format_ulong_base(n: int, base: str) -> str:
    """Format a non-negative ``n`` using the characters of ``base`` as digits."""
    if n < 0:
        raise ValueError(f"expected a non-negative value, got {n}")
    return _digits(n, base)


def contains(values: Iterable[int], n: int) -> bool:
    """Return whether ``n`` occurs in ``values``."""
    return n in values


def unsigned_length(n: int, base_size: int) -> int:
    """Number of digits needed to write a non-negative ``n`` in the given base."""
    _check_base_size(base_size)
    if n < 0:
        raise ValueError(f"expected a non-negative value, got {n}")
    count = 1 if n == 0 else 0
    while n:
        n //= base_size
        count += 1
    return count


def signed_length(n: int, base_size: int) -> int:
    """Number of characters needed to write ``n``, counting a minus sign."""
    length = unsigned_length(magnitude(n), base_size)
    return length + 1 if n < 0 else length