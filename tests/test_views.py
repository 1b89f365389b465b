"""Tests for list filters, history search and the month grid"""

from datetime import date, datetime

from frontdesk.views import (
    calendar_month,
    filter_reservations,
    matches_search,
    search_history,
    shift_month,
    sort_by_schedule,
)


def test_matches_search_fields(store, make_input):
    """Test search covers name, phone and email"""
    reservation = store.create(make_input())

    assert matches_search(reservation, "")
    assert matches_search(reservation, "jane")
    assert matches_search(reservation, "SMITH")
    assert matches_search(reservation, "555987")
    assert matches_search(reservation, "@EXAMPLE")
    assert not matches_search(reservation, "john")


def test_filter_combines_search_status_and_date(store, make_input):
    """Test every active filter must match"""
    jane = store.create(make_input())
    store.create(make_input(customer_name="Jane Doe", status="pending"))
    store.create(make_input(date="2025-01-11"))
    store.create(make_input(customer_name="John", customer_email="john@example.com"))

    result = filter_reservations(store.reservations, search="jane", status="confirmed", date="2025-01-10")

    assert result == [jane]


def test_filter_defaults_return_everything(store, make_input):
    """Test no filters leaves the list unchanged"""
    store.create(make_input())
    store.create(make_input(status="cancelled"))

    assert filter_reservations(store.reservations) == store.reservations


def test_sort_by_schedule(store, make_input):
    """Test ordering by date then time"""
    late = store.create(make_input(date="2025-01-11", time="17:00"))
    evening = store.create(make_input(date="2025-01-10", time="21:00"))
    early = store.create(make_input(date="2025-01-10", time="18:00"))

    assert sort_by_schedule(store.reservations) == [early, evening, late]
    assert store.reservations == [late, evening, early]


def test_search_history(store, make_input):
    """Test history search only looks at past reservations"""
    old = store.create(make_input(date="2025-01-01"))
    store.create(make_input(date="2025-01-20"))
    store.create(make_input(customer_name="Other", customer_email="", date="2025-01-02"))

    assert search_history(store, "jane") == [old]
    assert len(search_history(store)) == 2
    assert search_history(store, "jane", now=datetime(2024, 12, 1)) == []


def test_shift_month():
    """Test month navigation across year boundaries"""
    assert shift_month(2025, 1, -1) == (2024, 12)
    assert shift_month(2025, 12, 1) == (2026, 1)
    assert shift_month(2025, 5, 0) == (2025, 5)
    assert shift_month(2025, 3, -14) == (2024, 1)


def test_calendar_month_grid(store, make_input):
    """Test the grid starts on Sunday and spans six weeks"""
    days = calendar_month(2025, 1, [], today=date(2025, 1, 10))

    assert len(days) == 42
    # 1 January 2025 is a Wednesday
    assert days[0].date == date(2024, 12, 29)
    assert days[0].in_month is False
    assert days[3].date == date(2025, 1, 1)
    assert days[3].in_month is True
    assert [d.date for d in days if d.is_today] == [date(2025, 1, 10)]
    assert days[-1].date == date(2025, 2, 8)


def test_calendar_month_starting_on_sunday():
    """Test a month whose first day is Sunday starts on the 1st"""
    days = calendar_month(2025, 6, [], today=date(2025, 1, 10))

    assert days[0].date == date(2025, 6, 1)
    assert not any(d.is_today for d in days)


def test_calendar_day_reservations_and_overflow(store, make_input):
    """Test each day lists its reservations and counts extras"""
    for hour in range(17, 22):
        store.create(make_input(time=f"{hour}:00"))
    single = store.create(make_input(date="2025-01-11"))

    days = {d.date: d for d in calendar_month(2025, 1, store.reservations, today=date(2025, 1, 10))}

    busy = days[date(2025, 1, 10)]
    assert len(busy.reservations) == 5
    assert [r.time for r in busy.preview] == ["17:00", "18:00", "19:00"]
    assert busy.overflow == 2

    assert days[date(2025, 1, 11)].reservations == [single]
    assert days[date(2025, 1, 11)].overflow == 0
    assert days[date(2025, 1, 12)].reservations == []
