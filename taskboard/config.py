"""Environment configuration for the Task Board backend."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")
        self.FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SQL_ECHO: bool = _env_bool("SQL_ECHO")
        # Number of user-facing notifications kept by the notification feed
        self.NOTIFICATION_LIMIT: int = int(os.getenv("NOTIFICATION_LIMIT", "1"))
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "5000"))

    def validate(self) -> None:
        """Validate that required settings are usable."""
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL environment variable is required")
        if self.NOTIFICATION_LIMIT < 1:
            raise ValueError("NOTIFICATION_LIMIT must be a positive integer")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.validate()
    return settings
