# ABOUTME: Shared test fixtures for the weather app test suite.
# ABOUTME: Provides Open-Meteo sample payloads for geocoding and current weather responses.

import pytest

PARIS_GEOCODE = {
    "results": [
        {
            "id": 2988507,
            "name": "Paris",
            "latitude": 48.85,
            "longitude": 2.35,
            "country": "France",
            "admin1": "Île-de-France",
            "timezone": "Europe/Paris",
        },
        {
            "id": 4717560,
            "name": "Paris",
            "latitude": 33.66,
            "longitude": -95.56,
            "country": "United States",
            "admin1": "Texas",
        },
    ]
}

PARIS_WEATHER = {
    "latitude": 48.86,
    "longitude": 2.3399997,
    "timezone": "Europe/Paris",
    "current_weather": {
        "temperature": 18.2,
        "windspeed": 11.3,
        "winddirection": 250,
        "weathercode": 3,
        "is_day": 1,
        "time": "2024-05-01T12:00",
    },
}


@pytest.fixture
def paris_geocode() -> dict:
    return PARIS_GEOCODE


@pytest.fixture
def paris_weather() -> dict:
    return PARIS_WEATHER
