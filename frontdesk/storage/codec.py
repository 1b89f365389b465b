"""
Serialization of the reservation collection.

The whole collection is one JSON array of camelCase records, readable by
the browser front desk from its localStorage slot. There is no version field,
so every record goes through migrate_record() on the way in and older
blobs (no `arrived`, no `completed` status) load with defaults.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import structlog
from pydantic import ValidationError

from frontdesk.schemas.reservation import Reservation, ReservationStatus

logger = structlog.get_logger()

# Field-level defaults for records written by earlier revisions
RECORD_DEFAULTS: Dict[str, Any] = {
    "customerPhone": "",
    "customerEmail": "",
    "status": ReservationStatus.CONFIRMED.value,
    "arrived": False,
}


def encode_reservations(reservations: Sequence[Reservation]) -> str:
    """Serialize the full collection"""
    return json.dumps([r.to_record() for r in reservations])


def migrate_record(record: Dict[str, Any], now: datetime) -> Dict[str, Any]:
    """Fill in fields that older records may lack"""
    migrated = dict(record)
    for key, default in RECORD_DEFAULTS.items():
        if migrated.get(key) is None:
            migrated[key] = default
    
    if not migrated.get("createdAt"):
        migrated["createdAt"] = now.isoformat()
    
    # Old form state stored the table as a string
    table = migrated.get("tableNumber")
    if isinstance(table, str):
        table = table.strip()
        migrated["tableNumber"] = int(table) if table.isdigit() else None
    
    return migrated


def decode_reservations(raw: Optional[str], now: datetime) -> List[Reservation]:
    """
    Rebuild the collection from a stored blob.
    Never raises: corrupt data yields an empty list, bad records are skipped.
    """
    if not raw:
        return []
    
    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning("Stored reservations are not valid JSON, starting empty", error=str(e))
        return []
    
    if not isinstance(data, list):
        logger.warning(
            "Stored reservations are not a list, starting empty",
            found=type(data).__name__,
        )
        return []
    
    reservations: List[Reservation] = []
    seen_ids = set()
    for index, record in enumerate(data):
        if not isinstance(record, dict) or not record.get("id"):
            logger.warning("Skipping stored record without id", index=index)
            continue
        
        try:
            reservation = Reservation.model_validate(migrate_record(record, now))
        except ValidationError as e:
            logger.warning(
                "Skipping invalid stored reservation",
                index=index,
                reservation_id=record.get("id"),
                error_count=e.error_count(),
            )
            continue
        
        if reservation.id in seen_ids:
            logger.warning("Skipping duplicate reservation id", reservation_id=reservation.id)
            continue
        
        seen_ids.add(reservation.id)
        reservations.append(reservation)
    
    return reservations
