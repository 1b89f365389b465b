"""Durable key-value storage backends"""

from typing import Optional

from sqlalchemy.engine import Engine

from frontdesk.config import Settings
from frontdesk.database import get_session_factory
from frontdesk.storage.base import BaseStorage
from frontdesk.storage.memory import MemoryStorage
from frontdesk.storage.sql import SqlStorage
from frontdesk.storage.codec import decode_reservations, encode_reservations, migrate_record


def get_storage(settings: Settings, engine: Optional[Engine] = None) -> BaseStorage:
    """Factory function to create the configured storage backend"""
    if settings.uses_memory_storage:
        return MemoryStorage()
    if engine is None:
        raise ValueError(f"An engine is required for storage url: {settings.storage_url}")
    return SqlStorage(get_session_factory(engine))


__all__ = [
    "BaseStorage",
    "MemoryStorage",
    "SqlStorage",
    "get_storage",
    "decode_reservations",
    "encode_reservations",
    "migrate_record",
]
