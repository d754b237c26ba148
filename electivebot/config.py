"""Configuration management from environment variables."""

import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from electivebot.utils.constants import DEFAULT_SWEEP_INTERVAL, DEFAULT_TIMEZONE

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Telegram
    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

    # Catalog
    CATALOG_PATH: Path = Path(os.getenv("CATALOG_PATH", "./data/courses.json"))

    # Timezone used to show lecture times and to compute the current week
    TIMEZONE: str = os.getenv("TIMEZONE", DEFAULT_TIMEZONE)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Reminder sweep
    SWEEP_INTERVAL: int = int(os.getenv("SWEEP_INTERVAL", str(DEFAULT_SWEEP_INTERVAL)))
    SWEEP_FIRST: int = int(os.getenv("SWEEP_FIRST", "10"))

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.TELEGRAM_BOT_TOKEN:
            raise ValueError(
                "Telegram bot token is required (TELEGRAM_BOT_TOKEN or first argument)"
            )

        try:
            ZoneInfo(cls.TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Invalid TIMEZONE: {cls.TIMEZONE}") from e

        if cls.SWEEP_INTERVAL <= 0:
            raise ValueError("SWEEP_INTERVAL must be positive")

    @classmethod
    def time_zone(cls) -> ZoneInfo:
        return ZoneInfo(cls.TIMEZONE)
