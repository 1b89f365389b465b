"""Pydantic schemas for reservation records and inputs"""

from frontdesk.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationUpdate,
    ReservationStatus,
)
from frontdesk.schemas.forms import ReservationForm, TIME_SLOTS

__all__ = [
    "Reservation",
    "ReservationCreate",
    "ReservationUpdate",
    "ReservationStatus",
    "ReservationForm",
    "TIME_SLOTS",
]
