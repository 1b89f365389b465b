"""In-process storage backend"""

from typing import Dict, Optional

from frontdesk.storage.base import BaseStorage


class MemoryStorage(BaseStorage):
    """Dict-backed slots; nothing survives the process"""
    
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(initial or {})
    
    def load(self, key: str) -> Optional[str]:
        return self.slots.get(key)
    
    def save(self, key: str, value: str) -> None:
        self.slots[key] = value
