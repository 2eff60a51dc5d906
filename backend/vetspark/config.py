"""
Application configuration using Pydantic Settings.
Loads from environment variables with sensible defaults.
"""

from typing import Literal
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "VetSpark Clinic Coordinator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Clinic
    CLINIC_NAME: str = "Happy Paws Hospital"
    WALK_IN_DOCTOR: str = "Triage Vet"

    # Id prefixes
    APPOINTMENT_ID_PREFIX: str = "a"
    WALK_IN_ID_PREFIX: str = "w"
    NOTIFICATION_ID_PREFIX: str = "n"
    PET_ID_PREFIX: str = "p"

    # Reminders
    REMINDER_WINDOW_HOURS: int = 48  # default look-ahead for /reminders/due

    # Demo data
    SEED_DEMO_DATA: bool = True

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
