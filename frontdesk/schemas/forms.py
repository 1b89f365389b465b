"""Reservation form validation for the UI layer"""

import re
from datetime import date as calendar_date
from typing import Optional, Union
from pydantic import BaseModel, field_validator

from frontdesk.schemas.reservation import ReservationCreate, ReservationStatus

TIME_SLOTS = [
    "17:00", "17:30", "18:00", "18:30", "19:00", "19:30",
    "20:00", "20:30", "21:00", "21:30", "22:00",
]

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class ReservationForm(BaseModel):
    """
    New-reservation form as submitted by front-desk staff.
    The store accepts anything; this is where input gets rejected.
    """
    customer_name: str
    customer_phone: str = ""
    customer_email: str = ""
    party_size: int = 2
    date: str
    time: str
    table_number: Union[int, str, None] = None
    notes: str = ""
    status: ReservationStatus = ReservationStatus.CONFIRMED

    @field_validator("customer_name", "date", "time")
    @classmethod
    def required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please fill in customer name, date, and time.")
        return value

    @field_validator("date")
    @classmethod
    def iso_date(cls, value: str) -> str:
        try:
            calendar_date.fromisoformat(value)
        except ValueError:
            raise ValueError("Date must be YYYY-MM-DD")
        return value

    @field_validator("time")
    @classmethod
    def clock_time(cls, value: str) -> str:
        if not _TIME_RE.match(value):
            raise ValueError("Time must be HH:MM (24h)")
        return value

    @field_validator("party_size")
    @classmethod
    def positive_party(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Party size must be at least 1")
        return value

    @field_validator("table_number")
    @classmethod
    def table(cls, value: Union[int, str, None]) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            if not value.isdigit():
                raise ValueError("Table number must be a whole number")
            value = int(value)
        if value < 1:
            raise ValueError("Table number must be positive")
        return value

    def to_create(self) -> ReservationCreate:
        """Convert to the store's create input"""
        return ReservationCreate(
            customer_name=self.customer_name,
            customer_phone=self.customer_phone,
            customer_email=self.customer_email,
            party_size=self.party_size,
            date=self.date,
            time=self.time,
            table_number=self.table_number,
            notes=self.notes or None,
            status=self.status,
        )
