import io

import pytest

from emos.stdio import format_string, printf, putc, puts


def test_percent_char_and_string():
    assert format_string("Formatted %% %c %s\r\n", "a", "string") == "Formatted % a string\r\n"


def test_integer_conversions_from_boot_sample():
    result = format_string(
        "Formatted %d %i %x %p %o %hd %hi %hhu %hhd\r\n",
        1234, -5678, 0xDEAD, 0xBEEF, 0o12345, 27, -42, 20, -10,
    )
    assert result == "Formatted 1234 -5678 dead beef 12345 27 -42 20 -10\r\n"


def test_long_conversions_from_boot_sample():
    result = format_string(
        "Formatted %ld %lx %lld %llx\r\n",
        -100000000, 0xDEADBEEF, 10200300400, 0xDEADBEEFFEEBDAED,
    )
    assert result == "Formatted -100000000 deadbeef 10200300400 deadbeeffeebdaed\r\n"


def test_uppercase_hex_uses_lowercase_digits():
    assert format_string("%X", 0xBEEF) == "beef"


def test_unsigned_default_width_is_16_bits():
    assert format_string("%u", -1) == "65535"


def test_unsigned_long_is_32_bits():
    assert format_string("%lu", -1) == "4294967295"


def test_long_long_minimum():
    assert format_string("%lld", -(2**63)) == str(-(2**63))


@pytest.mark.parametrize("value", [0, 1, 7, 255, 4096, 0xBEEF, 0xFFFF])
def test_hex_and_octal_agree_with_builtin(value):
    assert format_string("%x", value) == format(value, "x")
    assert format_string("%o", value) == format(value, "o")


@pytest.mark.parametrize("value", [0, 1, -1, 1234, -5678, 32767])
def test_decimal_agrees_with_str_in_range(value):
    assert format_string("%d", value) == str(value)
    assert format_string("%i", value) == str(value)


def test_flags_width_and_precision_do_not_change_output():
    plain = format_string("%d", 42)
    assert format_string("%-08d", 42) == plain
    assert format_string("%+ #5.3d", 42) == plain


def test_star_width_consumes_argument():
    assert format_string("%*d|%d", 5, 42, 7) == "42|7"


def test_star_precision_consumes_argument():
    assert format_string("%**d", 3, 4, 99) == "99"


def test_unknown_specifier_is_dropped():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_format_stops_at_nul():
    assert format_string("ab\0cd") == "ab"


def test_string_argument_stops_at_nul():
    assert format_string("[%s]", "xy\0z") == "[xy]"


def test_char_from_integer():
    assert format_string("%c", ord("Q")) == "Q"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "1")
    with pytest.raises(TypeError):
        format_string("%s", 5)


def test_extra_arguments_are_ignored():
    assert format_string("%d", 1, 2, 3) == "1"


def test_printf_writes_formatted_text():
    stream = io.StringIO()
    printf("%s=%x\r\n", "value", 0xDEAD, out=stream)
    assert stream.getvalue() == format_string("%s=%x\r\n", "value", 0xDEAD)


def test_puts_writes_until_nul():
    stream = io.StringIO()
    puts("Hello\0world", out=stream)
    assert stream.getvalue() == "Hello"


def test_putc_writes_single_character():
    stream = io.StringIO()
    putc("a", out=stream)
    putc(ord("b"), out=stream)
    assert stream.getvalue() == "ab"


def test_printf_defaults_to_stdout(capsys):
    printf("%d", 1234)
    assert capsys.readouterr().out == "1234"