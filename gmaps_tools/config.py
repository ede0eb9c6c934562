"""Load configuration from environment."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# Google Maps Platform (one key for every tool; absence is reported by the API, not here)
API_KEY_ENV = "GOOGLE_MAPS_PLATFORM_API_KEY"
GOOGLE_MAPS_PLATFORM_API_KEY = os.getenv(API_KEY_ENV)

# Seconds to wait for a single upstream call
REQUEST_TIMEOUT_SECONDS = float(os.getenv("GMAPS_REQUEST_TIMEOUT", "30"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class MapsConfig:
    """Settings handed to the request executor once, at construction."""

    api_key: str | None = None
    timeout_seconds: float | None = REQUEST_TIMEOUT_SECONDS


def load_config() -> MapsConfig:
    """Build a MapsConfig from the process environment (and .env)."""
    return MapsConfig(
        api_key=GOOGLE_MAPS_PLATFORM_API_KEY or None,
        timeout_seconds=REQUEST_TIMEOUT_SECONDS,
    )
