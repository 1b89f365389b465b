"""Read-only views the front desk builds from store snapshots"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from frontdesk.schemas.reservation import Reservation
from frontdesk.store import ReservationStore

ALL_STATUSES = "all"
CALENDAR_CELLS = 42  # 6 weeks
CALENDAR_PREVIEW = 3


def matches_search(reservation: Reservation, term: str) -> bool:
    """Name and email match case-insensitively, phone matches as typed"""
    if not term:
        return True
    lowered = term.lower()
    return (
        lowered in reservation.customer_name.lower()
        or term in reservation.customer_phone
        or lowered in reservation.customer_email.lower()
    )


def filter_reservations(
    reservations: Iterable[Reservation],
    search: str = "",
    status: str = ALL_STATUSES,
    date: Optional[str] = None,
) -> List[Reservation]:
    """Apply the reservation list filters; all given filters must match"""
    return [
        r for r in reservations
        if matches_search(r, search)
        and (status == ALL_STATUSES or r.status.value == status)
        and (not date or r.date == date)
    ]


def sort_by_schedule(reservations: Iterable[Reservation]) -> List[Reservation]:
    """Earliest booking first"""
    return sorted(reservations, key=lambda r: (r.date, r.time))


def search_history(
    store: ReservationStore,
    term: str = "",
    now: Optional[datetime] = None,
) -> List[Reservation]:
    return [r for r in store.list_past(now) if matches_search(r, term)]


@dataclass
class CalendarDay:
    """One cell of the month grid"""
    date: date
    in_month: bool
    is_today: bool
    reservations: List[Reservation] = field(default_factory=list)

    @property
    def preview(self) -> List[Reservation]:
        return self.reservations[:CALENDAR_PREVIEW]

    @property
    def overflow(self) -> int:
        return max(0, len(self.reservations) - CALENDAR_PREVIEW)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, month) pair by delta months"""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def calendar_month(
    year: int,
    month: int,
    reservations: Iterable[Reservation],
    today: date,
) -> List[CalendarDay]:
    """
    Month grid of 42 days starting on the Sunday on or before the 1st.
    Each day carries its reservations in store order.
    """
    by_date = {}
    for reservation in reservations:
        by_date.setdefault(reservation.date, []).append(reservation)

    first = date(year, month, 1)
    # date.weekday(): Monday=0 .. Sunday=6
    start = first - timedelta(days=(first.weekday() + 1) % 7)

    days: List[CalendarDay] = []
    for offset in range(CALENDAR_CELLS):
        day = start + timedelta(days=offset)
        days.append(
            CalendarDay(
                date=day,
                in_month=day.month == month,
                is_today=day == today,
                reservations=by_date.get(day.isoformat(), []),
            )
        )
    return days
