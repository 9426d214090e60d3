from datetime import date, timedelta

from habitgrid.services.contribution import build_contribution
from habitgrid.views import group_by_week, month_headers


def test_empty_completions_give_all_false_week():
    days = build_contribution([], date(2025, 1, 1), date(2025, 1, 7))
    assert len(days) == 7
    assert not any(d.completed for d in days)


def test_length_and_order():
    start, end = date(2024, 2, 20), date(2024, 3, 10)
    days = build_contribution([], start, end)
    assert len(days) == (end - start).days + 1
    assert days[0].date == start
    assert days[-1].date == end
    assert all(a.date < b.date for a, b in zip(days, days[1:]))


def test_completed_matches_membership():
    start = date(2025, 1, 1)
    completed = {date(2025, 1, 2), date(2025, 1, 5), date(2024, 12, 31), date(2025, 2, 1)}
    days = build_contribution(completed, start, date(2025, 1, 10))
    for i, day in enumerate(days):
        assert day.date == start + timedelta(days=i)
        assert day.completed == (day.date in completed)


def test_single_day_window():
    days = build_contribution([date(2025, 1, 1)], date(2025, 1, 1), date(2025, 1, 1))
    assert [(d.date, d.completed) for d in days] == [(date(2025, 1, 1), True)]


def test_inverted_window_is_empty():
    assert build_contribution([date(2025, 1, 1)], date(2025, 1, 2), date(2025, 1, 1)) == []


def test_weeks_start_on_sunday():
    # 2025-01-01 is a Wednesday
    days = build_contribution([], date(2025, 1, 1), date(2025, 1, 12))
    weeks = group_by_week(days)
    assert [len(w) for w in weeks] == [4, 7, 1]
    assert weeks[1][0].date == date(2025, 1, 5)


def test_month_headers_sit_on_first_week_of_month():
    days = build_contribution([], date(2025, 1, 26), date(2025, 3, 8))
    weeks = group_by_week(days)
    headers = month_headers(weeks)
    assert [h["label"] for h in headers] == ["Feb", "Mar"]
    assert headers[0]["column"] == 1  # Jan 26 - Feb 1
    assert headers[1]["column"] == 5  # Feb 23 - Mar 1


def test_window_ending_on_last_calendar_day():
    days = build_contribution([date.max], date(9999, 12, 30), date.max)
    assert [(d.date, d.completed) for d in days] == [(date(9999, 12, 30), False), (date.max, True)]


def test_weeks_at_both_ends_of_the_calendar():
    # 0001-01-01 is a Monday, 9999-12-26 a Sunday
    first = group_by_week(build_contribution([], date.min, date(1, 1, 10)))
    assert [len(w) for w in first] == [6, 4]
    last = group_by_week(build_contribution([], date(9999, 12, 25), date.max))
    assert [len(w) for w in last] == [1, 6]
