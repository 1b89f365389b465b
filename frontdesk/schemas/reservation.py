"""Reservation schemas"""

import enum
from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle status"""
    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class ReservationCreate(BaseModel):
    """Create reservation input (no content validation)"""
    customer_name: str
    customer_phone: str = ""
    customer_email: str = ""
    party_size: int
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24h
    table_number: Optional[int] = None
    notes: Optional[str] = None
    status: ReservationStatus = ReservationStatus.CONFIRMED

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ReservationUpdate(BaseModel):
    """Partial reservation update"""
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_email: Optional[str] = None
    party_size: Optional[int] = None
    date: Optional[str] = None
    time: Optional[str] = None
    table_number: Optional[int] = None
    notes: Optional[str] = None
    status: Optional[ReservationStatus] = None
    arrived: Optional[bool] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


class Reservation(BaseModel):
    """A stored reservation"""
    id: str
    customer_name: str
    customer_phone: str = ""
    customer_email: str = ""
    party_size: int
    date: str
    time: str
    table_number: Optional[int] = None
    notes: Optional[str] = None
    status: ReservationStatus = ReservationStatus.CONFIRMED
    arrived: bool = False
    created_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

    @property
    def is_completed(self) -> bool:
        return self.status == ReservationStatus.COMPLETED

    def to_record(self) -> dict:
        """Persisted form: camelCase keys, absent optionals omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
