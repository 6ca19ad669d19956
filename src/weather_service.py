# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles city geocoding and current-conditions retrieval.

import logging

import httpx

from src.models import CurrentWeather

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CANDIDATE_COUNT = 5
LANGUAGE = "en"


async def geocode(client: httpx.AsyncClient, query: str, url: str = GEOCODING_URL) -> list[dict]:
    """Look up raw candidate locations for a city name, in provider order.

    Candidates are returned unparsed so that only the one the caller picks has to be
    valid. Any JSON body without ``results`` (including Open-Meteo's error bodies sent
    with a 4xx status) yields an empty list. A body that is not JSON raises.
    """
    logger.debug("Geocoding %r", query)
    resp = await client.get(url, params={"name": query, "count": CANDIDATE_COUNT, "language": LANGUAGE})
    data = resp.json()
    if resp.is_error:
        logger.warning("Geocoding API returned %d for %r: %s", resp.status_code, query, data)

    if not isinstance(data, dict) or not data.get("results"):
        return []
    return list(data["results"])


async def get_current_weather(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    url: str = FORECAST_URL,
) -> CurrentWeather | None:
    """Fetch current conditions for a coordinate, or None if the payload has none."""
    logger.debug("Fetching current weather for %s,%s", latitude, longitude)
    resp = await client.get(
        url,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "timezone": "auto",
        },
    )
    data = resp.json()
    if resp.is_error:
        logger.warning("Forecast API returned %d for %s,%s: %s", resp.status_code, latitude, longitude, data)

    if not isinstance(data, dict) or not data.get("current_weather"):
        return None
    return CurrentWeather.model_validate(data["current_weather"])
