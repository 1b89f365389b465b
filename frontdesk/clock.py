"""Wall-clock helpers for time-dependent reservation queries"""

from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]


def system_clock(timezone: str = "") -> Clock:
    """Clock reading host local time, or the named zone when given"""
    if not timezone:
        return datetime.now
    zone = ZoneInfo(timezone)
    return lambda: datetime.now(zone)


def date_key(now: datetime) -> str:
    """Calendar date of `now` as YYYY-MM-DD"""
    return now.date().isoformat()


def minutes_of_day(now: datetime) -> int:
    return now.hour * 60 + now.minute


def parse_clock_time(value: str) -> Optional[int]:
    """
    Minutes since midnight for an HH:MM string.
    Returns None if the string is not a clock time.
    """
    hours, sep, minutes = value.partition(":")
    if not sep:
        return None
    try:
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return None
