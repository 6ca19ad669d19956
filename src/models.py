# ABOUTME: Pydantic BaseModels for geocoding candidates, current weather, and search state.
# ABOUTME: Defines the structured types for Open-Meteo data and the mutable state of a city search.

from enum import Enum

from pydantic import BaseModel, ConfigDict

from src.errors import SearchError


class GeocodeResult(BaseModel):
    """One candidate location returned by the geocoding API."""

    name: str
    latitude: float
    longitude: float
    admin1: str | None = None
    country: str | None = None


class CurrentWeather(BaseModel):
    """Current conditions payload from the Open-Meteo forecast endpoint.

    Values are kept exactly as the provider sent them. Integers stay integers so that
    a reading of 18 renders as "18°C" rather than "18.0°C". Extra provider fields
    (weathercode, is_day, ...) are preserved.
    """

    model_config = ConfigDict(extra="allow")

    temperature: int | float
    windspeed: int | float
    time: str
    winddirection: int | float | None = None


class WeatherResult(BaseModel):
    """A resolved location label paired with its current weather."""

    display_name: str
    weather: CurrentWeather


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SearchState(BaseModel):
    """Mutable aggregate written by the search orchestrator.

    After a completed search exactly one of ``error`` or ``result`` is set. Both are
    None while idle or loading. ``generation`` counts search invocations and is used to
    discard outcomes of searches that were superseded by a newer one.
    """

    query: str = ""
    loading: bool = False
    error: str | None = None
    error_kind: type[SearchError] | None = None
    result: WeatherResult | None = None
    generation: int = 0

    @property
    def status(self) -> SearchStatus:
        if self.loading:
            return SearchStatus.LOADING
        if self.error is not None:
            return SearchStatus.FAILED
        if self.result is not None:
            return SearchStatus.SUCCEEDED
        return SearchStatus.IDLE


def build_display_name(location: GeocodeResult) -> str:
    """Join name, region and country with ", ", skipping the parts that are missing."""
    parts = [location.name, location.admin1, location.country]
    return ", ".join(part for part in parts if part)
