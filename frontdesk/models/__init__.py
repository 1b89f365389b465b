"""Database models"""

from frontdesk.models.storage import StorageSlot

__all__ = [
    "StorageSlot",
]
