# ABOUTME: Runtime settings for the weather console, read from the environment.
# ABOUTME: Loads an optional .env file and parses WEATHER_CONSOLE_* variables into a Pydantic model.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

ENV_PREFIX = "WEATHER_CONSOLE_"


class Settings(BaseModel):
    """Tunable knobs for the HTTP client, the startup search, and logging."""

    default_query: str = "Chennai"
    search_count: int = Field(default=10, ge=1, le=100)
    language: str = "en"
    http_timeout: float = Field(default=10.0, gt=0)
    http_retries: int = Field(default=3, ge=1)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from WEATHER_CONSOLE_* environment variables, falling back to defaults."""
        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls(**values)
