"""
Application configuration using Pydantic Settings
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Restaurant
    restaurant_name: str = "Izabela Restaurant"
    timezone: str = ""  # empty = host local time
    
    # Storage
    storage_url: str = "sqlite:///./reservations.db"
    storage_slot: str = "restaurant-reservations"
    
    # Reservations
    late_grace_minutes: int = 30
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    
    @property
    def uses_memory_storage(self) -> bool:
        """True when state should not outlive the process"""
        return self.storage_url.startswith("memory://")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

