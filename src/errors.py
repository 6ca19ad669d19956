# ABOUTME: Error taxonomy for a city weather search.
# ABOUTME: Each kind carries the fixed user-facing message and the HTTP status the web layer returns.


class SearchError(Exception):
    """Terminal failure of one search attempt."""

    message = "Search failed."
    status_code = 500

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class EmptyQueryError(SearchError):
    message = "Please enter a city name."
    status_code = 400


class LocationNotFoundError(SearchError):
    message = "City not found. Try a different name or spelling."
    status_code = 404


class WeatherUnavailableError(SearchError):
    message = "Weather data not available for this location."
    status_code = 404


class TransportFailureError(SearchError):
    message = "Something went wrong while fetching data. Check your connection."
    status_code = 502
