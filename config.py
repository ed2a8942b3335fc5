"""Runtime settings for the booking calendar service.

Settings are read from environment variables, with a `.env` file in the
working directory loaded first if present:

    BOOKING_LOG_LEVEL=DEBUG
    BOOKING_SEED_DEMO_EVENTS=true
    BOOKING_FIXED_NOW=2025-05-21T03:28:00
"""

import logging
import os
from datetime import datetime
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "BOOKING_"


class BookingSettings(BaseModel):
    """Service configuration.

    Args:
        log_level: Root logging level name.
        seed_demo_events: Whether new sessions start with the demo events.
        fixed_now: Pin the session clock to this time (None = system clock).
    """

    log_level: str = Field(default="INFO", description="Root logging level name")
    seed_demo_events: bool = Field(
        default=False, description="Whether new sessions start with the demo events"
    )
    fixed_now: Optional[datetime] = Field(
        default=None, description="Pinned session time (None = system clock)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows.

        Raises:
            ValueError: If the level name is unknown.
        """
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "BookingSettings":
        """Build settings from BOOKING_* environment variables.

        Unset variables fall back to the field defaults.

        Args:
            load_dotenv_file: Whether to load a `.env` file first.

        Returns:
            The resolved settings.
        """
        if load_dotenv_file:
            load_dotenv()

        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)


def configure_logging(settings: BookingSettings) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
