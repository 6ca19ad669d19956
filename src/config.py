# ABOUTME: Runtime settings for the weather app, read from the environment.
# ABOUTME: Loads a .env file if present and falls back to defaults for every value.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from src.weather_service import FORECAST_URL, GEOCODING_URL


class Settings(BaseModel):
    """Endpoints, HTTP timeout, logging level and bind address."""

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    http_timeout: float = 10.0
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    """Build Settings from the environment, reading a .env file first if one exists."""
    load_dotenv()
    return Settings(
        geocoding_url=os.environ.get("GEOCODING_URL", GEOCODING_URL),
        forecast_url=os.environ.get("FORECAST_URL", FORECAST_URL),
        http_timeout=os.environ.get("HTTP_TIMEOUT", "10"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        host=os.environ.get("HOST", "127.0.0.1"),
        port=os.environ.get("PORT", "8000"),
    )
