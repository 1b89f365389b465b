"""Key-value slot model"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text

from frontdesk.database import Base


class StorageSlot(Base):
    """One named slot holding a serialized blob"""
    __tablename__ = "storage_slots"
    
    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    
    # Metadata
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
