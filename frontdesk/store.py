"""
Reservation store.

Owns the canonical, ordered reservation collection for one restaurant.
The collection is read from a single storage slot when the store is built
and the whole collection is written back after every mutation.

Lookups by id never raise. Updating or deleting an id the store does not
hold is a silent no-op. The store also does no input validation; forms
are checked with frontdesk.schemas.forms before they get here.
"""

import uuid
from datetime import datetime
from typing import Callable, Dict, List, Optional, Union

import structlog

from frontdesk.clock import Clock, date_key, minutes_of_day, parse_clock_time, system_clock
from frontdesk.exceptions import StorageError
from frontdesk.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationStatus,
    ReservationUpdate,
)
from frontdesk.storage.base import BaseStorage
from frontdesk.storage.codec import decode_reservations, encode_reservations

logger = structlog.get_logger()

DEFAULT_SLOT = "restaurant-reservations"
DEFAULT_LATE_GRACE_MINUTES = 30

# Optional fields an update may clear with an explicit None
CLEARABLE_FIELDS = {"table_number", "notes"}

PersistErrorHandler = Callable[[StorageError], None]


class ReservationStore:
    """In-memory reservation collection persisted to one key-value slot"""

    def __init__(
        self,
        storage: BaseStorage,
        slot: str = DEFAULT_SLOT,
        clock: Optional[Clock] = None,
        late_grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
        on_persist_error: Optional[PersistErrorHandler] = None,
    ):
        self.storage = storage
        self.slot = slot
        self.clock = clock or system_clock()
        self.late_grace_minutes = late_grace_minutes
        self.on_persist_error = on_persist_error
        self.last_persist_error: Optional[StorageError] = None
        self._reservations: List[Reservation] = self._load()

    # Persistence

    def _load(self) -> List[Reservation]:
        try:
            raw = self.storage.load(self.slot)
        except StorageError as e:
            logger.warning("Could not read reservations, starting empty", slot=self.slot, error=str(e))
            return []

        reservations = decode_reservations(raw, self.clock())
        logger.info("Reservations loaded", slot=self.slot, count=len(reservations))
        return reservations

    def _persist(self) -> None:
        """Write the full collection; failures leave memory as is"""
        try:
            self.storage.save(self.slot, encode_reservations(self._reservations))
        except StorageError as e:
            self.last_persist_error = e
            logger.warning(
                "Reservations changed in memory but could not be saved",
                slot=self.slot,
                error=str(e),
            )
            if self.on_persist_error:
                self.on_persist_error(e)
            return

        self.last_persist_error = None

    def _index_of(self, reservation_id: str) -> Optional[int]:
        for index, reservation in enumerate(self._reservations):
            if reservation.id == reservation_id:
                return index
        return None

    def _new_id(self) -> str:
        existing = {r.id for r in self._reservations}
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in existing:
                return candidate

    # Mutations

    def create(self, data: Union[ReservationCreate, Dict]) -> Reservation:
        """Add a reservation at the end of the collection"""
        if not isinstance(data, ReservationCreate):
            data = ReservationCreate.model_validate(data)

        reservation = Reservation(
            **data.model_dump(),
            id=self._new_id(),
            arrived=False,
            created_at=self.clock(),
        )
        self._reservations.append(reservation)
        self._persist()

        logger.info(
            "Reservation created",
            reservation_id=reservation.id,
            date=reservation.date,
            time=reservation.time,
            party_size=reservation.party_size,
        )
        return reservation

    def update(self, reservation_id: str, updates: Union[ReservationUpdate, Dict]) -> None:
        """Merge fields into a reservation; id and created_at never change"""
        index = self._index_of(reservation_id)
        if index is None:
            logger.debug("Update ignored, reservation not found", reservation_id=reservation_id)
            return

        if not isinstance(updates, ReservationUpdate):
            updates = ReservationUpdate.model_validate(updates)

        changes = {
            field: value
            for field, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or field in CLEARABLE_FIELDS
        }
        self._reservations[index] = self._reservations[index].model_copy(update=changes)
        self._persist()

        logger.info("Reservation updated", reservation_id=reservation_id, fields=sorted(changes))

    def delete(self, reservation_id: str) -> None:
        """Remove a reservation permanently"""
        index = self._index_of(reservation_id)
        if index is None:
            logger.debug("Delete ignored, reservation not found", reservation_id=reservation_id)
            return

        del self._reservations[index]
        self._persist()

        logger.info("Reservation deleted", reservation_id=reservation_id)

    def mark_arrived(self, reservation_id: str) -> None:
        self.update(reservation_id, ReservationUpdate(arrived=True))

    def complete(self, reservation_id: str) -> None:
        """Move a reservation into history without deleting it"""
        self.update(reservation_id, ReservationUpdate(status=ReservationStatus.COMPLETED))

    # Queries

    @property
    def reservations(self) -> List[Reservation]:
        """Snapshot of every reservation in store order"""
        return list(self._reservations)

    def get(self, reservation_id: str) -> Optional[Reservation]:
        index = self._index_of(reservation_id)
        return None if index is None else self._reservations[index]

    def list_by_date(self, date: str) -> List[Reservation]:
        return [r for r in self._reservations if r.date == date]

    def list_today(self, now: Optional[datetime] = None) -> List[Reservation]:
        """Today's reservations that are not completed yet"""
        today = date_key(now or self.clock())
        return [r for r in self._reservations if r.date == today and not r.is_completed]

    def list_past(self, now: Optional[datetime] = None) -> List[Reservation]:
        """
        History view: anything dated before today, plus every completed
        reservation whatever its date.
        """
        today = date_key(now or self.clock())
        return [r for r in self._reservations if r.date < today or r.is_completed]

    def is_late(self, reservation: Reservation, now: Optional[datetime] = None) -> bool:
        """
        True when a guest booked for today has not arrived and the grace
        window after the booked time has fully elapsed.
        """
        now = now or self.clock()
        if reservation.date != date_key(now) or reservation.arrived:
            return False

        booked = parse_clock_time(reservation.time)
        if booked is None:
            return False

        return minutes_of_day(now) > booked + self.late_grace_minutes
