"""Tests for free-text input parsing, calendar and display formatting."""

from __future__ import annotations

from datetime import date

import pytest

from core.formatting import format_compact, format_currency
from core.parsing import parse_day, parse_money_input, parse_optional_money
from core.period import day_label, resolve_calendar


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12,50", 12.5),
        ("R$ 1500", 1500.0),
        ("  300.25 ", 300.25),
        ("-30", -30.0),
        ("1.5.2", 1.5),
        ("1.234,56", 1.234),
        ("", 0.0),
        ("abc", 0.0),
        ("-", 0.0),
        (None, 0.0),
    ],
)
def test_parse_money_input(text, expected):
    assert parse_money_input(text) == pytest.approx(expected)


def test_parse_optional_money_blank_is_none():
    assert parse_optional_money("   ") is None
    assert parse_optional_money(None) is None
    assert parse_optional_money("0") == 0.0
    assert parse_optional_money("x") == 0.0


@pytest.mark.parametrize(
    ("text", "expected"),
    [("05", 5), (" 12 ", 12), ("12abc", 12), ("-3", -3), ("", None), ("abc", None), (7, 7)],
)
def test_parse_day(text, expected):
    assert parse_day(text) == expected


@pytest.mark.parametrize("text", ["١٢", "०१", "１２"])
def test_non_ascii_digits_are_not_numbers(text):
    assert parse_money_input(text) == 0.0
    assert parse_day(text) is None


def test_resolve_calendar_leap_february():
    calendar = resolve_calendar(date(2024, 2, 10))

    assert calendar.today == 10
    assert calendar.month == 2
    assert calendar.year == 2024
    assert calendar.days_in_month == 29
    assert calendar.days_left == 20


def test_resolve_calendar_last_day():
    calendar = resolve_calendar(date(2025, 12, 31))

    assert calendar.days_in_month == 31
    assert calendar.days_left == 1


def test_day_label():
    assert day_label(7, 3) == "7/3"
    assert day_label(7, None) == "7"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1234.5, "R$ 1.234,50"),
        (0.0, "R$ 0,00"),
        (-10.0, "-R$ 10,00"),
        (1_000_000.0, "R$ 1.000.000,00"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_currency_custom_separators():
    assert format_currency(1234.5, symbol="£", decimal_separator=".", thousands_separator=",") == "£ 1,234.50"
    assert format_currency(5.0, symbol="") == "5,00"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(53.33, "53,3"), (1200.0, "1,2K"), (0.0, "0"), (10.0, "10"), (2_500_000.0, "2,5M")],
)
def test_format_compact(value, expected):
    assert format_compact(value) == expected
