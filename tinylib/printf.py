"""Formatted output with a small subset of printf conversions.

Supported conversions are ``%c %s %p %d %i %u %x %X %%``. The flags
``- 0 . # space +`` are recognised. A bare number or one after a space sets
a right-justified field width; a number after ``-`` or ``0`` sets the width
for left justification or zero padding; a number after ``.`` sets the
precision. Other characters between ``%`` and the conversion are ignored.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from tinylib.chars import is_digit
from tinylib.numbers import format_ulong_base, magnitude
from tinylib.output import put_str

_HEX = "0123456789abcdef"
_DECIMAL = "0123456789"
_HEX_PREFIX = "0x"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 2**64 - 1
_DIGITS = re.compile(r"[0-9]*")
_STDOUT = 1


class Spec(Enum):
    """A conversion character."""

    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    DECIMAL = "d"
    INT = "i"
    UINT = "u"
    HEXA = "x"
    HEXA_UPPER = "X"
    PERCENT = "%"


class Flag(Enum):
    """A conversion flag character."""

    MINUS = "-"
    ZERO = "0"
    DOT = "."
    HASH = "#"
    SPACE = " "
    PLUS = "+"


_SPEC_CHARS = frozenset(spec.value for spec in Spec)
_FLAG_CHARS = frozenset(flag.value for flag in Flag)


@dataclass
class Conversion:
    """The parsed form of one ``%`` directive."""

    flags: set[Flag] = field(default_factory=set)
    left_width: int = 0
    right_width: int = 0
    precision: int = 0
    spec: Optional[Spec] = None


def parse_conversion(fmt: str, start: int) -> tuple[Conversion, int]:
    """Parse the directive whose ``%`` is at ``fmt[start]``.

    Returns the conversion and the index just past its conversion character.
    Raises ValueError when the directive has no conversion character.
    """
    conv = Conversion()
    i = start
    while True:
        i += 1
        if i >= len(fmt) or fmt[i] in _SPEC_CHARS:
            break
        ch = fmt[i]
        run = _DIGITS.match(fmt, i + 1).group()
        if ch in _FLAG_CHARS:
            flag = Flag(ch)
            conv.flags.add(flag)
            if run:
                value = int(run)
                if flag is Flag.SPACE:
                    conv.right_width = value
                if flag is Flag.DOT:
                    conv.precision = value
                if flag in (Flag.MINUS, Flag.ZERO):
                    conv.left_width = value
        elif is_digit(ch):
            conv.right_width = int(ch + run)
        i += len(run)
    if i >= len(fmt):
        raise ValueError(f"incomplete conversion at index {start} of {fmt!r}")
    conv.spec = Spec(fmt[i])
    return conv, i + 1


def _zeros(conv: Conversion, digits: int, body: int, precision_base: int) -> int:
    if Flag.DOT in conv.flags and conv.precision > digits:
        return conv.precision - precision_base
    if Flag.ZERO in conv.flags and conv.left_width > body:
        return conv.left_width - body
    return 0


def convert_signed(n: int, conv: Conversion, base: str, prefix: str) -> str:
    """Write ``n`` in ``base`` with its sign, ``prefix`` (for positive values)
    and the zero padding that ``conv`` asks for."""
    digits = format_ulong_base(magnitude(n), base)
    if n < 0:
        sign = "-"
    elif Flag.PLUS in conv.flags:
        sign = "+"
    elif Flag.SPACE in conv.flags:
        sign = " "
    else:
        sign = ""
    pre = prefix if n > 0 else ""
    body = len(digits) + len(sign) + len(pre)
    zeros = _zeros(conv, len(digits), body, len(digits))
    return f"{sign}{pre}{'0' * zeros}{digits}"


def convert_unsigned(n: int, conv: Conversion, base: str, prefix: str) -> str:
    """Write a non-negative ``n`` in ``base`` with ``prefix`` (when non-zero)
    and the sign and zero padding that ``conv`` asks for.

    A precision is padded against the size of the base rather than the digit
    count; a precision smaller than the base size raises ValueError.
    """
    if n < 0:
        raise ValueError(f"expected a non-negative value, got {n}")
    digits = format_ulong_base(n, base)
    if Flag.PLUS in conv.flags:
        sign = "+"
    elif Flag.SPACE in conv.flags:
        sign = " "
    else:
        sign = ""
    pre = prefix if n > 0 else ""
    body = len(digits) + len(sign) + len(pre)
    zeros = _zeros(conv, len(digits), body, len(base))
    if zeros < 0:
        raise ValueError(
            f"precision {conv.precision} is smaller than the base size {len(base)}"
        )
    return f"{sign}{pre}{'0' * zeros}{digits}"


def _pad(active: bool, size: int, length: int) -> str:
    return " " * (size - length) if active and size > length else ""


def _surround(conv: Conversion, text: str, length: int, right: bool) -> str:
    return (
        _pad(right, conv.right_width, length)
        + text[:length]
        + _pad(Flag.MINUS in conv.flags, conv.left_width, length)
    )


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(value: Any, spec: Spec) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec.value} needs an integer, got {type(value).__name__}")
    return value


def _to_int32(n: int) -> int:
    return ((n + 2**31) & _UINT_MASK) - 2**31


def _convert(conv: Conversion, args: Iterator[Any]) -> str:
    spec = conv.spec
    dotted = Flag.DOT in conv.flags
    if spec is Spec.PERCENT:
        return "%"
    arg = _next_arg(args)
    if spec is Spec.CHAR:
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"%c needs a single character, got {arg!r}")
            ch = arg
        else:
            ch = chr(_int_arg(arg, spec) & 0xFF)
        return _surround(conv, ch, 1, not dotted)
    if spec is Spec.STRING:
        if arg is not None and not isinstance(arg, str):
            raise TypeError(f"%s needs a string, got {type(arg).__name__}")
        text = "(null)" if arg is None else arg
        length = len(text)
        if arg is None and 0 < conv.right_width < 6:
            length = 0
        if dotted and conv.precision < length:
            length = conv.precision
        return _surround(conv, text, length, True)
    if spec is Spec.POINTER:
        value = 0 if arg is None else _int_arg(arg, spec) & _POINTER_MASK
        if value == 0:
            text = "(nil)"
        else:
            text = convert_unsigned(value, conv, _HEX, _HEX_PREFIX)
        length = len(text)
        if value == 0 and 0 < conv.right_width < 5:
            length = 0
        return _surround(conv, text, length, not dotted)
    number = _int_arg(arg, spec)
    if spec in (Spec.DECIMAL, Spec.INT):
        text = convert_signed(_to_int32(number), conv, _DECIMAL, "")
    elif spec is Spec.UINT:
        text = convert_signed(number & _UINT_MASK, conv, _DECIMAL, "")
    else:
        prefix = _HEX_PREFIX if Flag.HASH in conv.flags else ""
        text = convert_signed(number & _UINT_MASK, conv, _HEX, prefix)
        if spec is Spec.HEXA_UPPER:
            text = text.upper()
    return _surround(conv, text, len(text), not dotted)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        j = fmt.find("%", i)
        if j < 0:
            yield fmt[i:]
            return
        if j > i:
            yield fmt[i:j]
        conv, i = parse_conversion(fmt, j)
        yield _convert(conv, remaining)


def render(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output and return the bytes written.

    Text before a faulty directive is written before the error is raised.
    """
    return sum(put_str(piece, _STDOUT) for piece in _pieces(fmt, args))