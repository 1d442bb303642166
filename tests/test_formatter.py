import pytest

from ftprintf.formatter import printf, sformat


def test_plain_text_passes_through():
    assert sformat("hello world") == "hello world"


def test_empty_and_none_formats():
    assert sformat("") == ""
    assert sformat(None) == ""


def test_text_stops_at_nul():
    assert sformat("abc\0def") == "abc"


def test_percent_escape():
    assert sformat("%%") == "%"


def test_lone_trailing_percent_is_dropped():
    assert sformat("abc%") == "abc"


def test_unterminated_directive_prints_nothing():
    assert sformat("ab%-3") == "ab"


def test_string_conversion():
    assert sformat("%s", "abc") == "abc"


def test_null_string():
    assert sformat("%s", None) == "(null)"


@pytest.mark.parametrize("value", [0, 7, 42, -42, 123456, -2147483648])
def test_decimal_matches_str(value):
    assert sformat("%d", value) == str(value)
    assert sformat("%i", value) == str(value)


def test_unsigned_wraps_negative():
    assert sformat("%u", -1) == str(2 ** 32 - 1)


@pytest.mark.parametrize("value", [1, 255, 4096, 0xDEADBEEF])
def test_hex_and_octal_match_stdlib(value):
    assert sformat("%x", value) == format(value, "x")
    assert sformat("%X", value) == format(value, "X")
    assert sformat("%o", value) == format(value, "o")


def test_pointer():
    assert sformat("%p", 255) == hex(255)


def test_char_conversion():
    assert sformat("%c", "A") == "A"


def test_nul_char():
    assert sformat("%c", 0) == "\0"


def test_width_right_aligned():
    assert sformat("%5d", 42) == f"{42:>5}"
    assert sformat("%5s", "ab") == f"{'ab':>5}"


def test_width_left_aligned():
    assert sformat("%-5d", 42) == f"{42:<5}"
    assert sformat("%-5s", "ab") == f"{'ab':<5}"


def test_zero_padding():
    assert sformat("%05d", 42) == f"{42:05d}"


def test_string_precision_truncates():
    assert sformat("%.2s", "hello") == "he"


def test_float_default():
    assert sformat("%f", 1.5) == f"{1.5:f}"


def test_length_modifier_hh():
    assert sformat("%hhd", 255) == "-1"


def test_mixed_directives():
    assert sformat("%s is %d", "x", 3) == "x is 3"


def test_extra_arguments_ignored():
    assert sformat("%d", 5, 6, 7) == "5"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sformat("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s-%d", "ab", 12)
    out = capsys.readouterr().out
    assert out == sformat("%s-%d", "ab", 12)
    assert count == len(out)


def test_printf_counts_nul_char(capsys):
    count = printf("%c", 0)
    assert capsys.readouterr().out == "\0"
    assert count == 1