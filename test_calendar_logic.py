from datetime import date

import pytest

from calendar_logic import (
    EMPTY,
    add_months,
    build_month_grid,
    first_weekday_index,
    next_month,
    prev_month,
    weeks,
)


def _blanks(cells):
    n = 0
    for cell in cells:
        if not cell.is_empty:
            break
        n += 1
    return n


@pytest.mark.parametrize("d, idx", [
    (date(2024, 6, 1), 0),   # Saturday
    (date(2024, 9, 1), 1),   # Sunday
    (date(2024, 7, 1), 2),   # Monday
    (date(2024, 2, 1), 5),   # Thursday
    (date(2024, 3, 1), 6),   # Friday
])
def test_first_weekday_index_starts_on_saturday(d, idx):
    assert first_weekday_index(d) == idx


def test_monday_month_has_two_leading_blanks():
    cells = build_month_grid(date(2024, 7, 15))
    assert _blanks(cells) == 2
    assert cells[2].date == date(2024, 7, 1)


def test_saturday_month_has_no_blanks():
    cells = build_month_grid(date(2024, 6, 30))
    assert cells[0].date == date(2024, 6, 1)


@pytest.mark.parametrize("year, month, n_days", [
    (2024, 2, 29), (2023, 2, 28), (2024, 4, 30), (2024, 12, 31),
])
def test_grid_has_one_cell_per_day(year, month, n_days):
    cells = build_month_grid(date(year, month, 10))
    days = [c.date for c in cells if not c.is_empty]
    assert len(days) == n_days
    assert days == sorted(days)
    assert days[0].day == 1 and days[-1].day == n_days
    assert 0 <= _blanks(cells) <= 6
    assert all(c.is_empty for c in cells[:_blanks(cells)])


def test_grid_ignores_day_of_month_and_is_memoized():
    assert build_month_grid(date(2024, 2, 1)) is build_month_grid(date(2024, 2, 28))


def test_grid_invalid_anchor():
    assert build_month_grid(None) == ()
    assert build_month_grid("2024-02-01") == ()


def test_weeks_pads_last_row():
    rows = weeks(build_month_grid(date(2024, 2, 1)))
    assert all(len(r) == 7 for r in rows)
    assert len(rows) == 5
    assert rows[-1][-1] is EMPTY
    assert rows[0][5].date == date(2024, 2, 1)


def test_prev_next_month_wrap_years():
    assert prev_month(2024, 1) == (2023, 12)
    assert next_month(2024, 12) == (2025, 1)
    assert next_month(2024, 5) == (2024, 6)


def test_add_months():
    assert add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)
    assert add_months(date(2024, 1, 15), -1) == date(2023, 12, 15)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2024, 5, 9), 0) == date(2024, 5, 9)


def test_add_months_there_and_back():
    d = date(2024, 1, 31)
    back = add_months(add_months(d, 1), -1)
    assert (back.year, back.month) == (d.year, d.month)
