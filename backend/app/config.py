"""Centralised application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./sports_coaching.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Attendance history window
    HISTORY_DEFAULT_DAYS: int = 30
    HISTORY_DEFAULT_LIMIT: int = 30

    # Progress report
    RECENT_ATTENDANCE_LIMIT: int = 10

    # Session adjustments
    ADJUSTMENT_LIST_LIMIT: int = 50

    class Config:
        # load backend/.env regardless of the working directory
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
