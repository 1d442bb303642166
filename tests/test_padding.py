import pytest

from ftprintf.padding import (
    check_precision,
    check_precision_char,
    check_sign,
    check_width,
    check_width_char,
    count_num,
    float_text,
    join_char,
    join_int,
    join_r_int,
    join_reverse_char,
    minus,
    plus,
    put_minus,
    round_digits,
)


def test_count_num_ignores_sign():
    assert count_num("-42") == len("-42") - 1
    assert count_num("+7") == len("+7") - 1
    assert count_num("123") == len("123")


def test_join_int_unchanged_without_width_or_precision():
    assert join_int(0, "1", "42", -1) == "42"
    assert join_int(-3, "0", "42", -1) == "42"


def test_join_int_space_and_zero_fill():
    assert join_int(3, "1", "42", -1) == " " * 3 + "42"
    assert join_int(3, "0", "42", -1) == "0" * 3 + "42"


def test_join_int_precision():
    assert join_int(0, "1", "7", 2) == "00" + "7"


def test_join_r_int_space_fill():
    assert join_r_int(3, "1", "42", -1) == "42" + " " * 3


def test_join_r_int_precision():
    assert join_r_int(0, "1", "5", 2) == "00" + "5"


def test_join_r_int_unchanged_without_width():
    assert join_r_int(0, "1", "42", -1) == "42"


@pytest.mark.parametrize(
    "spec, number, expected",
    [
        ("%5d", "42", 5 - len("42")),
        ("%-07d", "1", 7 - len("1")),
        ("%.5d", "42", 0),
        ("%d", "42", 0),
    ],
)
def test_check_width(spec, number, expected):
    assert check_width(spec, number) == expected


def test_check_precision():
    assert check_precision("%d", "42") == -1
    assert check_precision("%.5d", "42") == 5 - len("42")
    assert check_precision("%.1d", "42") == -1
    assert check_precision("%.d", "42") == -1
    assert check_precision("%.3f", "1.5") == 3


def test_check_sign():
    assert check_sign("%+d", "42") == "+" + "42"
    assert check_sign("%+d", "-42") == "-42"
    assert check_sign("%d", "42") == "42"
    assert check_sign("%++d", "42") == "-" + "42"


def test_join_char_fills_left():
    assert join_char(5, "1", "ab") == " " * 3 + "ab"
    assert join_char(5, "0", "ab") == "0" * 3 + "ab"
    assert join_char(1, "1", "abc") == "abc"


def test_join_char_counts_null_marker_as_one():
    assert join_char(4, "1", "x^@") == " " * 2 + "x^@"


def test_join_reverse_char_fills_right():
    assert join_reverse_char(5, "1", "ab") == "ab" + " " * 3
    assert join_reverse_char(2, "1", "abc") == "abc"


def test_check_width_char():
    assert check_width_char("%5s") == 5
    assert check_width_char("%05s") == 5
    assert check_width_char("%.3s") == 0
    assert check_width_char("%s") == 0


def test_check_precision_char():
    assert check_precision_char("%.3s") == 3
    assert check_precision_char("%.s") == 0
    assert check_precision_char("%s") == -1


@pytest.mark.parametrize("value", [1.5, 2.25, -3.125, 0.5, -0.5, 0.0])
def test_float_text_matches_exact_binary_fractions(value):
    assert float_text(value, 7) == f"{value:.6f}"


def test_float_text_negative_zero_head():
    assert float_text(-0.25, 7).startswith("-0.")


def test_float_text_keeps_one_digit_fewer():
    assert len(float_text(3.5, 7).split(".")[1]) == 6


def test_round_digits_drops_last_digit_without_nines():
    assert round_digits("1.2500000") == "1.2500000"[:-1]


def test_round_digits_carries_long_run():
    assert round_digits("1.2999999") == "1.300000"


def test_round_digits_short_run_before_point_untouched():
    assert round_digits("99.1000000") == "99.1000000"[:-1]


def test_plus_and_minus():
    assert plus("42") == "+42"
    assert plus("  42") == "  " + "+42"
    assert plus("  ") == "  "
    assert minus("42") == "-42"
    assert minus("0042") == "-" + "0042"


def test_put_minus_moves_sign_in_front():
    assert put_minus("00-42") == "-0042"
    assert put_minus("00+7") == "+007"


def test_put_minus_leaves_well_placed_sign():
    assert put_minus("  -42") == "  -42"
    assert put_minus("42") == "42"
    assert put_minus("-42") == "-42"