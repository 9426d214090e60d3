from datetime import date

import pytest

from habitgrid.utils.dates import (
    iter_days, month_start, parse_iso_date, previous_month_start, sunday_weekday, week_start
)


@pytest.mark.parametrize("value", [None, "", "2025-13-01", "2025/01/01", "2025-01-01T10:00:00"])
def test_parse_iso_date_rejects(value):
    assert parse_iso_date(value) is None


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)


def test_sunday_is_zero():
    assert sunday_weekday(date(2025, 1, 5)) == 0
    assert sunday_weekday(date(2025, 1, 11)) == 6


def test_week_start():
    assert week_start(date(2025, 1, 1)) == date(2024, 12, 29)
    assert week_start(date(2025, 1, 5)) == date(2025, 1, 5)


def test_month_steps():
    assert month_start(date(2024, 3, 31)) == date(2024, 3, 1)
    assert previous_month_start(date(2024, 3, 31)) == date(2024, 2, 1)
    assert previous_month_start(date(2025, 1, 15)) == date(2024, 12, 1)


def test_iter_days_inclusive():
    assert list(iter_days(date(2024, 2, 28), date(2024, 3, 1))) == [
        date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)
    ]
    assert list(iter_days(date(2024, 3, 2), date(2024, 3, 1))) == []
