"""Classification and case conversion of single ASCII characters.

Every function accepts either a one-character string or an integer
character code. The case converters return the same kind they were given.
"""

from __future__ import annotations

_EOF = -1
_CHAR_MIN = -128
_UCHAR_MAX = 255
_CASE_OFFSET = 32


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def _convert_case(c: int | str, first: str, last: str, delta: int) -> int | str:
    code = _code(c)
    if code == _EOF or code < _CHAR_MIN or code > _UCHAR_MAX:
        result = code
    else:
        result = code & 0xFF
        if ord(first) <= code <= ord(last):
            result += delta
    return chr(result) if isinstance(c, str) else result


def to_lower(c: int | str) -> int | str:
    """Convert an uppercase ASCII letter to lowercase; other values pass through.

    Integer codes in the signed-char range are reported as unsigned bytes.
    """
    return _convert_case(c, "A", "Z", _CASE_OFFSET)


def to_upper(c: int | str) -> int | str:
    """Convert a lowercase ASCII letter to uppercase; other values pass through.

    Integer codes in the signed-char range are reported as unsigned bytes.
    """
    return _convert_case(c, "a", "z", -_CASE_OFFSET)