"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode connection strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Ledger settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Ledger Core"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./ledger.db")

    # Posting policy
    DEFAULT_CURRENCY: str = os.getenv("LEDGER_DEFAULT_CURRENCY", "USD").upper()
    ALLOW_ZERO_AMOUNTS: bool = (
        os.getenv("LEDGER_ALLOW_ZERO_AMOUNTS", "false").lower() == "true"
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls, so environment variables are read once.
    """
    return Settings()
