from datetime import date, datetime, timedelta

import pytest

from digits import to_ascii_digits
from persian_calendar import (
    YEAR_OFFSET,
    day_label,
    gregorian_to_persian_text,
    month_name,
    persian_labels,
    persian_text_to_gregorian,
    year_label,
)


class BrokenFormatter:
    def month_name(self, d):
        raise ValueError("no Persian calendar here")

    year_digits = month_digits = day_digits = month_name


class AsciiFormatter:
    """Fixed Persian date 1400/1/2, always."""

    def month_name(self, d):
        return "Farvardin"

    def year_digits(self, d):
        return "1400"

    def month_digits(self, d):
        return "1"

    def day_digits(self, d):
        return "2"


@pytest.mark.parametrize("g, text", [
    (date(2024, 3, 20), "۱۴۰۳/۰۱/۰۱"),
    (date(2024, 3, 19), "۱۴۰۲/۱۲/۲۹"),
    (date(2025, 3, 21), "۱۴۰۴/۰۱/۰۱"),
    (date(2024, 12, 21), "۱۴۰۳/۱۰/۰۱"),
])
def test_gregorian_to_persian_text(g, text):
    assert gregorian_to_persian_text(g) == text


def test_gregorian_to_persian_text_accepts_datetime():
    assert gregorian_to_persian_text(datetime(2024, 3, 20, 14, 35)) == "۱۴۰۳/۰۱/۰۱"


@pytest.mark.parametrize("bad", [None, "", "2024-03-20", 20240320])
def test_gregorian_to_persian_text_invalid(bad):
    assert gregorian_to_persian_text(bad) == ""


def test_formatting_failure_gives_empty_labels():
    d = date(2024, 3, 20)
    assert gregorian_to_persian_text(d, BrokenFormatter()) == ""
    assert month_name(d, BrokenFormatter()) == ""
    assert year_label(d, BrokenFormatter()) == ""
    assert persian_labels(d, BrokenFormatter()) == ("", "", "")


def test_injected_formatter_digits_are_localized():
    assert gregorian_to_persian_text(date(2000, 1, 1), AsciiFormatter()) == "۱۴۰۰/۰۱/۰۲"
    assert month_name(date(2000, 1, 1), AsciiFormatter()) == "Farvardin"


def test_month_name_and_year_label():
    assert month_name(date(2024, 3, 20)) == "فروردین"
    assert month_name(date(2024, 12, 21)) == "دی"
    assert year_label(date(2024, 3, 20)) == "۱۴۰۳"
    assert month_name(None) == ""
    assert year_label("x") == ""


def test_labels_are_padded_except_grid_day():
    d = date(2024, 3, 20)
    assert persian_labels(d) == ("۱۴۰۳", "۰۱", "۰۱")
    assert day_label(d) == "۱"
    assert day_label(date(2024, 4, 8)) == "۲۰"


@pytest.mark.parametrize("text", ["۱۴۰۳/۰۵/۰۹", "1403/05/09", "1403/5/9", " 1403 / 05 / 09 "])
def test_parse_applies_year_offset(text):
    assert persian_text_to_gregorian(text) == date(2024, 5, 9)


@pytest.mark.parametrize("text", [
    None, "", "1403/05", "1403/05/09/01", "1403-05-09", "۱۴۰۳/ab/۰۹", "1403//09",
    "1403/13/01", "1403/00/10", "1403/02/31",
])
def test_parse_failures(text):
    assert persian_text_to_gregorian(text) is None


def test_parse_year_out_of_range():
    assert persian_text_to_gregorian("9500/01/01") is None


def test_exact_parse_uses_real_calendar():
    assert persian_text_to_gregorian("۱۴۰۳/۰۱/۰۱", exact=True) == date(2024, 3, 20)
    assert persian_text_to_gregorian("1403/12/30", exact=True) == date(2025, 3, 20)
    assert persian_text_to_gregorian("1402/12/30", exact=True) is None


def test_round_trip_with_year_offset():
    d = date(2024, 1, 1)
    for _ in range(366):
        text = gregorian_to_persian_text(d)
        y, m, dd = (int(p) for p in to_ascii_digits(text).split("/"))
        try:
            expected = date(y + YEAR_OFFSET, m, dd)
        except ValueError:
            # Persian day with no same-numbered Gregorian day, e.g. 1403/02/31
            expected = None
        assert persian_text_to_gregorian(text) == expected
        d += timedelta(days=1)


def test_round_trip_exception_is_none():
    # 2024-05-20 is 1403/02/31; there is no 31 February
    assert gregorian_to_persian_text(date(2024, 5, 20)) == "۱۴۰۳/۰۲/۳۱"
    assert persian_text_to_gregorian("۱۴۰۳/۰۲/۳۱") is None


def test_exact_round_trip():
    d = date(2023, 3, 1)
    for _ in range(400):
        assert persian_text_to_gregorian(gregorian_to_persian_text(d), exact=True) == d
        d += timedelta(days=1)
