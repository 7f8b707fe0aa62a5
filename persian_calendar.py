"""Gregorian <-> Persian (Jalali) conversion and Persian labels.

The Gregorian ``datetime.date`` is the canonical form for all arithmetic.
Persian text is only ever produced here, as ``YYYY/MM/DD`` in Persian digits.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Protocol

import jdatetime

from digits import to_ascii_digits, to_persian_digits

logger = logging.getLogger(__name__)

# Linear year offset used when reading Persian text back. Not a calendrical
# inverse: month and day are taken over unchanged.
YEAR_OFFSET = 621

MONTH_NAMES_FA = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

_NUMBER = re.compile(r"[0-9]+")


class CalendarFormatter(Protocol):
    """Locale capability the converter formats through."""

    def month_name(self, d: date) -> str: ...

    def year_digits(self, d: date) -> str: ...

    def month_digits(self, d: date) -> str: ...

    def day_digits(self, d: date) -> str: ...


class JalaliFormatter:
    """Persian calendar formatter backed by jdatetime."""

    @staticmethod
    def _jalali(d: date) -> jdatetime.date:
        return jdatetime.date.fromgregorian(date=d)

    def month_name(self, d: date) -> str:
        return MONTH_NAMES_FA[self._jalali(d).month - 1]

    def year_digits(self, d: date) -> str:
        return str(self._jalali(d).year)

    def month_digits(self, d: date) -> str:
        return str(self._jalali(d).month)

    def day_digits(self, d: date) -> str:
        return str(self._jalali(d).day)


DEFAULT_FORMATTER: CalendarFormatter = JalaliFormatter()


def as_date(value) -> date | None:
    """Return *value* as a plain ``date``, or None if it is not one."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def _parts(d, formatter: CalendarFormatter | None) -> tuple[str, str, str] | None:
    d = as_date(d)
    if d is None:
        return None
    fmt = formatter or DEFAULT_FORMATTER
    try:
        year = to_ascii_digits(fmt.year_digits(d))
        month = to_ascii_digits(fmt.month_digits(d)).zfill(2)
        day = to_ascii_digits(fmt.day_digits(d)).zfill(2)
    except (ValueError, OverflowError, LookupError) as exc:
        logger.warning("Cannot format %s in the Persian calendar: %s", d, exc)
        return None
    return year, month, day


def gregorian_to_persian_text(d, formatter: CalendarFormatter | None = None) -> str:
    """Return ``YYYY/MM/DD`` in Persian digits, or "" for an unusable date."""
    parts = _parts(d, formatter)
    if parts is None:
        return ""
    return to_persian_digits("/".join(parts))


def persian_labels(d, formatter: CalendarFormatter | None = None) -> tuple[str, str, str]:
    """Return (year, 2-digit month, 2-digit day) in Persian digits."""
    parts = _parts(d, formatter)
    if parts is None:
        return "", "", ""
    year, month, day = parts
    return to_persian_digits(year), to_persian_digits(month), to_persian_digits(day)


def persian_text_to_gregorian(text, exact: bool = False) -> date | None:
    """Parse ``Y/M/D`` (either digit script) into a Gregorian date.

    By default the year is shifted by ``YEAR_OFFSET`` and month/day are used
    as-is, so e.g. 1403/02/31 has no Gregorian counterpart and yields None.
    With ``exact=True`` the real Persian calendar is used instead.
    """
    if not text:
        return None
    parts = to_ascii_digits(text).split("/")
    if len(parts) != 3:
        logger.debug("Rejected date text %r: expected three parts", text)
        return None
    parts = [p.strip() for p in parts]
    if not all(_NUMBER.fullmatch(p) for p in parts):
        logger.debug("Rejected date text %r: non-numeric part", text)
        return None
    year, month, day = (int(p) for p in parts)
    try:
        if exact:
            return jdatetime.date(year, month, day).togregorian()
        return date(year + YEAR_OFFSET, month, day)
    except (ValueError, OverflowError) as exc:
        logger.debug("Rejected date text %r: %s", text, exc)
        return None


def month_name(d, formatter: CalendarFormatter | None = None) -> str:
    """Persian name of the Persian month containing *d*."""
    d = as_date(d)
    if d is None:
        return ""
    try:
        return (formatter or DEFAULT_FORMATTER).month_name(d)
    except (ValueError, OverflowError, LookupError) as exc:
        logger.warning("Cannot name the Persian month of %s: %s", d, exc)
        return ""


def year_label(d, formatter: CalendarFormatter | None = None) -> str:
    """Persian-digit year of the Persian year containing *d*."""
    return persian_labels(d, formatter)[0]


def day_label(d, formatter: CalendarFormatter | None = None) -> str:
    """Unpadded Persian-digit day number, as shown in a grid cell."""
    day = persian_labels(d, formatter)[2]
    if len(day) > 1 and day.startswith("۰"):
        return day[1:]
    return day
