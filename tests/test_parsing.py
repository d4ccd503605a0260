from datetime import date, datetime

import pytest

from src.showdesk.services.parsing import (
    parse_amount_or_zero,
    parse_optional_amount,
    parse_optional_count,
    parse_show_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        ("1,500", 1500.0),
        (" 250.5 ", 250.5),
        (42, 42.0),
    ],
)
def test_parse_amount_or_zero_is_total(value, expected):
    assert parse_amount_or_zero(value) == expected


def test_parse_optional_amount_keeps_absent_distinct_from_zero():
    assert parse_optional_amount("") is None
    assert parse_optional_amount("not a number") is None
    assert parse_optional_amount("0") == 0.0
    assert parse_optional_amount("-19.17") == -19.17


def test_parse_optional_count():
    assert parse_optional_count("3") == 3
    assert parse_optional_count("2.5") is None
    assert parse_optional_count(None) is None


def test_parse_show_date_is_date_only():
    assert parse_show_date("2024-06-15") == date(2024, 6, 15)
    assert parse_show_date(date(2024, 6, 15)) == date(2024, 6, 15)
    assert parse_show_date(datetime(2024, 6, 15, 23, 59)) == date(2024, 6, 15)
    assert parse_show_date("2024-06-15T10:00:00Z") is None
    assert parse_show_date("2024-02-31") is None
    assert parse_show_date("0-06-15") is None
    assert parse_show_date(None) is None
