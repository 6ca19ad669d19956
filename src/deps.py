# ABOUTME: Dependency container for the weather app using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and settings shared by every search request.

import httpx
from pydantic import BaseModel, ConfigDict

from src.config import Settings


class SearchDeps(BaseModel):
    """Dependencies shared by the web layer and the search orchestrator."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with the configured timeout.

    Requests are not retried. A timeout surfaces as an httpx error which the
    orchestrator reports as a transport failure.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        headers={"Accept": "application/json"},
    )
