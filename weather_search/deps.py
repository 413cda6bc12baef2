# ABOUTME: Shared HTTP client construction for the weather search app.
# ABOUTME: One httpx.AsyncClient is created per application and handed to every session.

import httpx

from weather_search import config


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create the httpx client used for geocoding and forecast calls.

    Requests are never retried: a failed lookup is re-triggered by the user typing
    or submitting again.
    """
    return httpx.AsyncClient(
        timeout=config.HTTP_TIMEOUT_SECONDS if timeout is None else timeout,
        headers={"Accept": "application/json"},
    )
