import pytest

from pipex.printf import (
    DECIMAL,
    HEX_LOWER,
    HEX_UPPER,
    format_string,
    printf,
    put_number_base,
)


def test_plain_text_unchanged():
    assert format_string("hello world") == "hello world"


def test_percent_literal():
    assert format_string("Teste %%") == "Teste %"


def test_integers_and_strings():
    assert format_string("%d %i %s", 42, -10, "Hello") == "42 -10 Hello"


def test_char_from_str_and_int():
    assert format_string("%c%c", "F", ord("G")) == "FG"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string(" %p %p ", 0, 0) == " (nil) (nil) "


def test_pointer_round_trip():
    result = format_string("%p", 4096)
    assert result.startswith("0x")
    assert int(result, 16) == 4096


def test_hex_round_trip():
    lower = format_string("%x", 48879)
    upper = format_string("%X", 48879)
    assert int(lower, 16) == 48879
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -42)) + 42 == 2 ** 32


def test_int_wraps_to_32_bits():
    assert format_string("%d", 2 ** 32 + 5) == "5"


def test_unknown_conversion_dropped():
    assert format_string("a%qb", 1) == "ab"


def test_trailing_percent_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_string("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf(" %% %i %d %s", -10, 800, "x")
    captured = capsys.readouterr().out
    assert captured == " % -10 800 x"
    assert count == len(captured)


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 123456789])
def test_put_number_base_round_trip(value):
    assert int(put_number_base(value, DECIMAL)) == value
    assert int(put_number_base(value, HEX_LOWER), 16) == value
    assert int(put_number_base(value, HEX_UPPER), 16) == value


def test_put_number_base_negative():
    assert put_number_base(-255, DECIMAL) == "-255"


def test_put_number_base_binary_round_trip():
    assert int(put_number_base(37, "01"), 2) == 37


def test_put_number_base_rejects_short_base():
    with pytest.raises(ValueError):
        put_number_base(5, "0")