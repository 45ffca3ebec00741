from unittest.mock import patch

import pytest

from pageutils.services.numbers import format_money, random_num
from pageutils.services.strings import capitalization, escape_html


# --- capitalization ---
def test_capitalization():
    assert capitalization("hello") == "Hello"
    assert capitalization("hello world") == "Hello world"
    assert capitalization("Already") == "Already"


def test_capitalization_empty_string():
    assert capitalization("") == ""


def test_capitalization_single_character():
    assert capitalization("a") == "A"


# --- escape_html ---
def test_escape_html_replaces_all_special_characters():
    escaped = escape_html('<a href="x">\'s</a>')
    assert escaped == "&lt;a href=&quot;x&quot;&gt;&#39;s&lt;/a&gt;"


def test_escape_html_ampersand_is_escaped_once():
    assert escape_html("Tom & Jerry &amp;") == "Tom &amp; Jerry &amp;amp;"


def test_escape_html_plain_text_unchanged():
    assert escape_html("plain text 123") == "plain text 123"


@pytest.mark.parametrize("falsy", ["", None])
def test_escape_html_returns_falsy_input_unchanged(falsy):
    assert escape_html(falsy) is falsy


# --- format_money ---
@pytest.mark.parametrize(
    "num, digits, expected",
    [
        (1234567.5, 2, "1,234,567.50"),
        (999, 0, "999"),
        (1000, 2, "1,000.00"),
        (0, 2, "0.00"),
        (123.456, 1, "123.5"),
        (1234.5, 0, "1,235"),
        (2.5, 0, "3"),
        (100000000, 2, "100,000,000.00"),
    ],
)
def test_format_money(num, digits, expected):
    assert format_money(num, digits) == expected


def test_format_money_default_digits():
    assert format_money(12.3) == "12.30"


def test_format_money_rounds_exact_binary_value():
    # 1.005 is stored as 1.00499999999999989...
    assert format_money(1.005, 2) == "1.00"


def test_format_money_negative_keeps_sign_in_front():
    assert format_money(-1234.5) == "-1,234.50"
    assert format_money(-999.999, 2) == "-1,000.00"


def test_format_money_negative_zero():
    assert format_money(-0.0) == "0.00"


# --- random_num ---
@pytest.mark.parametrize("low, high", [(1, 6), (-5, 5), (0, 1), (7, 7)])
def test_random_num_stays_in_inclusive_range(low, high):
    for _ in range(500):
        value = random_num(low, high)
        assert isinstance(value, int)
        assert low <= value <= high


def test_random_num_hits_both_bounds():
    with patch("pageutils.services.numbers.random.random", return_value=0.0):
        assert random_num(3, 9) == 3
    with patch("pageutils.services.numbers.random.random", return_value=0.9999999):
        assert random_num(3, 9) == 9


def test_format_money_switches_to_exponent_form_from_1e21():
    assert format_money(1e21) == "1e+21"
    assert format_money(-2.5e22) == "-2.5e+22"
    assert format_money(1e20, 0) == "100,000,000,000,000,000,000"
