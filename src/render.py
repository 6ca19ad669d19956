# ABOUTME: View model for the browser UI built from a SearchState.
# ABOUTME: Formats temperature, wind and timestamp strings exactly as the page displays them.

from src.models import CurrentWeather, SearchState, SearchStatus

IDLE_HINT = "Search any city to view weather details."
BUTTON_LABEL = "Go"
LOADING_LABEL = "..."


def format_temperature(weather: CurrentWeather) -> str:
    """Render the temperature in degrees Celsius, e.g. "18.2°C"."""
    return f"{weather.temperature}°C"


def format_windspeed(weather: CurrentWeather) -> str:
    """Render the wind speed with its unit."""
    # Open-Meteo reports current_weather wind speed in km/h unless windspeed_unit is set.
    return f"{weather.windspeed} km/h"


def format_winddirection(weather: CurrentWeather) -> str | None:
    """Render the wind direction in degrees, or None when the provider omits it."""
    if weather.winddirection is None:
        return None
    return f"{weather.winddirection}°"


def render_state(state: SearchState) -> dict:
    """Turn the search state into the JSON payload consumed by the page."""
    result = None
    if state.result is not None:
        weather = state.result.weather
        result = {
            "display_name": state.result.display_name,
            "temperature": format_temperature(weather),
            "windspeed": format_windspeed(weather),
            "winddirection": format_winddirection(weather),
            "time": weather.time,
            "weather": weather.model_dump(mode="json"),
        }

    hint = IDLE_HINT if state.status is SearchStatus.IDLE else None
    return {
        "status": state.status.value,
        "query": state.query,
        "loading": state.loading,
        "button_label": LOADING_LABEL if state.loading else BUTTON_LABEL,
        "error": state.error,
        "hint": hint,
        "result": result,
    }
