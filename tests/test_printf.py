import pytest

from tinylib.printf import (
    Conversion,
    Flag,
    Spec,
    convert_signed,
    convert_unsigned,
    parse_conversion,
    printf,
    render,
)

HEX = "0123456789abcdef"
DEC = "0123456789"


def test_plain_text_passes_through():
    assert render("hello world") == "hello world"


def test_extra_arguments_are_ignored():
    assert render("x", 1, 2) == "x"


def test_percent_literal():
    assert render("100%%") == "100%"


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%i", -42),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%+d", 42),
        ("% d", 42),
        ("%.3d", 7),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 255),
        ("%u", 123),
    ],
)
def test_numbers_agree_with_standard_printf(fmt, value):
    assert render(fmt, value) == fmt % value


@pytest.mark.parametrize(
    "fmt, value",
    [("%s", "abc"), ("%.2s", "abc"), ("%5s", "abc"), ("%-5s|", "abc"), ("%5c", "A")],
)
def test_text_agrees_with_standard_printf(fmt, value):
    assert render(fmt, value) == fmt % value


def test_char_from_code():
    assert render("%c", 65) == "A"


def test_char_code_keeps_low_byte():
    assert render("%c", 321) == render("%c", 65)


def test_null_string():
    assert render("%s", None) == "(null)"


def test_null_string_in_narrow_field_is_blank():
    assert render("%3s", None) == " " * 3


def test_null_pointer():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"


@pytest.mark.parametrize("fmt, std", [("%p", "%#x"), ("%20p", "%#20x"), ("%-20p|", "%-#20x|")])
def test_pointer_matches_prefixed_hex(fmt, std):
    assert render(fmt, 255) == std % 255


@pytest.mark.parametrize("n", [0, 1, 9, 10, 12345, 2**31 - 1, -(2**31), -1])
def test_decimal_round_trip(n):
    assert int(render("%d", n)) == n


@pytest.mark.parametrize("n", [0, 1, 15, 16, 4096, 2**32 - 1])
def test_hex_and_unsigned_round_trip(n):
    assert int(render("%x", n), 16) == n
    assert int(render("%u", n)) == n


def test_int_wraps_to_32_bits():
    assert render("%d", 2**31) == "%d" % -(2**31)


def test_negative_hex_is_unsigned():
    assert render("%x", -1) == "%x" % 0xFFFFFFFF


def test_unknown_characters_are_ignored():
    assert render("%ld", 5) == render("%d", 5)


def test_upper_hex_is_upper_of_lower():
    assert render("%#X", 48879) == render("%#x", 48879).upper()


def test_incomplete_conversion_raises():
    with pytest.raises(ValueError):
        render("abc %")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        render("%d", "seven")


def test_parse_left_width():
    fmt = "%-10d"
    conv, end = parse_conversion(fmt, 0)
    assert Flag.MINUS in conv.flags
    assert conv.left_width == 10
    assert conv.spec is Spec.DECIMAL
    assert end == len(fmt)


def test_parse_space_sets_right_width():
    conv, _ = parse_conversion("% 7d", 0)
    assert Flag.SPACE in conv.flags
    assert conv.right_width == 7


def test_parse_precision_and_offset():
    fmt = "ab%.4xcd"
    conv, end = parse_conversion(fmt, 2)
    assert conv.precision == 4
    assert conv.spec is Spec.HEXA
    assert fmt[end:] == "cd"


def test_parse_digits_after_ignored_char_are_skipped():
    conv, _ = parse_conversion("%l5d", 0)
    assert conv.right_width == 0
    assert conv.spec is Spec.DECIMAL


def test_parse_without_spec_raises():
    with pytest.raises(ValueError):
        parse_conversion("%-5", 0)


def test_convert_signed_zero_padding():
    conv = Conversion(flags={Flag.ZERO}, left_width=6)
    assert convert_signed(-42, conv, DEC, "") == "%06d" % -42


def test_convert_signed_prefix_only_for_positive():
    conv = Conversion()
    assert convert_signed(0, conv, HEX, "0x") == "%x" % 0


def test_convert_unsigned_plus_and_prefix():
    conv = Conversion(flags={Flag.PLUS})
    assert convert_unsigned(255, conv, HEX, "0x") == "%+#x" % 255


def test_convert_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        convert_unsigned(-1, Conversion(), HEX, "")


def test_convert_unsigned_small_precision_raises():
    conv = Conversion(flags={Flag.DOT}, precision=5)
    with pytest.raises(ValueError):
        convert_unsigned(255, conv, HEX, "0x")


def test_printf_writes_and_counts(capfd):
    count = printf("x%dy%s", 5, "ok")
    out, _ = capfd.readouterr()
    assert out == render("x%dy%s", 5, "ok")
    assert count == len(out)


def test_printf_writes_text_before_error(capfd):
    with pytest.raises(ValueError):
        printf("ab%")
    out, _ = capfd.readouterr()
    assert out == "ab"