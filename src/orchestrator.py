# ABOUTME: Search orchestrator that turns a city query into current weather or an error message.
# ABOUTME: Runs geocode then weather lookup sequentially and keeps SearchState consistent across paths.

import logging
from collections.abc import Callable, Sequence

import httpx

from src.config import Settings
from src.errors import (
    EmptyQueryError,
    LocationNotFoundError,
    SearchError,
    TransportFailureError,
    WeatherUnavailableError,
)
from src.models import GeocodeResult, SearchState, WeatherResult, build_display_name
from src.weather_service import geocode, get_current_weather

logger = logging.getLogger(__name__)

CandidateSelector = Callable[[Sequence[dict]], dict]


def select_first_candidate(candidates: Sequence[dict]) -> dict:
    """Pick the provider's first candidate.

    This is a known limitation: there is no scoring or disambiguation, so "Paris" resolves
    to whichever Paris the geocoding API lists first. Pass a different selector to
    SearchOrchestrator to change it. Selectors see the raw API candidates; only the
    chosen one is validated.
    """
    return candidates[0]


class SearchOrchestrator:
    """Drives one search at a time against a shared SearchState.

    Every call to ``search`` bumps ``state.generation``. A search that finishes after a
    newer one has started leaves the state untouched, so only the latest search writes
    ``error``, ``result`` and ``loading``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        state: SearchState | None = None,
        select: CandidateSelector = select_first_candidate,
        settings: Settings | None = None,
    ):
        self.client = client
        self.state = state if state is not None else SearchState()
        self.select = select
        self.settings = settings or Settings()

    async def search(self, query: str) -> SearchState:
        """Resolve ``query`` to current weather, recording the outcome on ``self.state``.

        Never raises for search failures: each one is mapped to its fixed message in
        ``state.error``.
        """
        state = self.state
        state.generation += 1
        generation = state.generation

        state.query = query
        state.error = None
        state.error_kind = None
        state.result = None

        q = query.strip()
        if not q:
            state.loading = False
            self._record_error(EmptyQueryError())
            return state

        state.loading = True
        outcome: WeatherResult | SearchError
        try:
            outcome = await self._lookup(q)
        except SearchError as e:
            logger.info("Search for %r failed: %s", q, e.message)
            outcome = e
        except Exception:
            logger.exception("Weather lookup for %r failed", q)
            outcome = TransportFailureError()
        finally:
            if generation == state.generation:
                state.loading = False

        if generation != state.generation:
            logger.debug("Discarding stale result for %r (generation %d)", q, generation)
            return state

        if isinstance(outcome, SearchError):
            self._record_error(outcome)
        else:
            state.result = outcome
        return state

    async def _lookup(self, query: str) -> WeatherResult:
        candidates = await geocode(self.client, query, url=self.settings.geocoding_url)
        if not candidates:
            raise LocationNotFoundError()

        match = GeocodeResult.model_validate(self.select(candidates))
        display_name = build_display_name(match)

        weather = await get_current_weather(
            self.client, match.latitude, match.longitude, url=self.settings.forecast_url
        )
        if weather is None:
            raise WeatherUnavailableError()

        return WeatherResult(display_name=display_name, weather=weather)

    def _record_error(self, error: SearchError) -> None:
        self.state.error = error.message
        self.state.error_kind = type(error)
        self.state.result = None
