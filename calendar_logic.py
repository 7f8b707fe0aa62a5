"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from functools import lru_cache

# Week starts on Saturday (شنبه) and ends on Friday (جمعه)
WEEKDAY_ABBR_FA = ["ش", "ی", "د", "س", "چ", "پ", "ج"]


@dataclass(frozen=True)
class DayCell:
    """One grid position: a real day, or a blank used for alignment."""

    date: date | None = None

    @property
    def is_empty(self) -> bool:
        return self.date is None


EMPTY = DayCell()


def first_weekday_index(d: date) -> int:
    """Column of *d* in a Saturday-first week (Saturday = 0 … Friday = 6)."""
    # date.weekday(): Monday = 0 … Sunday = 6
    return (d.weekday() + 2) % 7


@lru_cache(maxsize=32)
def _month_cells(year: int, month: int) -> tuple[DayCell, ...]:
    first = date(year, month, 1)
    n_days = calendar.monthrange(year, month)[1]
    blanks = (EMPTY,) * first_weekday_index(first)
    return blanks + tuple(DayCell(date(year, month, day)) for day in range(1, n_days + 1))


def build_month_grid(anchor) -> tuple[DayCell, ...]:
    """Return the cells of the Gregorian month containing *anchor*.

    Leading blanks align day 1 under its weekday column; no trailing blanks
    are added. The day-of-month of *anchor* is ignored.
    """
    if not isinstance(anchor, date):
        return ()
    return _month_cells(anchor.year, anchor.month)


def weeks(cells) -> list[list[DayCell]]:
    """Split a flat cell sequence into rows of 7, padding the last row."""
    rows: list[list[DayCell]] = []
    row: list[DayCell] = []
    for cell in cells:
        row.append(cell)
        if len(row) == 7:
            rows.append(row)
            row = []
    if row:
        row.extend([EMPTY] * (7 - len(row)))
        rows.append(row)
    return rows


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def add_months(d: date, delta: int) -> date:
    """Move *d* by *delta* months, clamping the day to the target month."""
    year, month = d.year, d.month
    step = next_month if delta > 0 else prev_month
    for _ in range(abs(delta)):
        year, month = step(year, month)
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
