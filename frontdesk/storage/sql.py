"""SQLAlchemy-backed storage"""

from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from frontdesk.exceptions import StorageError
from frontdesk.models.storage import StorageSlot
from frontdesk.storage.base import BaseStorage

logger = structlog.get_logger()


class SqlStorage(BaseStorage):
    """Slots kept as rows of the storage_slots table"""
    
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
    
    def load(self, key: str) -> Optional[str]:
        try:
            with self.session_factory() as db:
                slot = db.get(StorageSlot, key)
                return slot.value if slot else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read slot {key!r}: {e}", key=key) from e
    
    def save(self, key: str, value: str) -> None:
        try:
            with self.session_factory() as db:
                db.merge(StorageSlot(key=key, value=value))
                db.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write slot {key!r}: {e}", key=key) from e
        
        logger.debug("Slot written", key=key, size=len(value))
