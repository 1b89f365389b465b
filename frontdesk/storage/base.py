"""Base key-value storage interface"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseStorage(ABC):
    """Abstract base class for durable key-value slots"""
    
    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if the slot is empty"""
        pass
    
    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Overwrite the slot with value"""
        pass
