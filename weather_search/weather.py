# ABOUTME: Controller that fetches and holds current weather for a chosen location.
# ABOUTME: Tracks loading/error state and lets only the most recently issued request win.

import logging
from collections.abc import Awaitable, Callable

import httpx

from weather_search.models import LocationCandidate, WeatherSnapshot, WeatherState
from weather_search.weather_service import build_snapshot, get_current_weather

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch weather data. Please try again."

Listener = Callable[[], Awaitable[None]]


class WeatherController:
    """Owns the weather panel state for one session."""

    def __init__(self, http_client: httpx.AsyncClient, on_change: Listener | None = None):
        self.http_client = http_client
        self.state = WeatherState()
        self.on_change = on_change
        self._seq = 0

    async def select_location(self, candidate: LocationCandidate) -> WeatherSnapshot | None:
        """Fetch weather for `candidate` and publish the result.

        Returns the new snapshot, or None when the fetch failed or a later call
        superseded this one. A superseded call leaves the state untouched.
        """
        self._seq += 1
        seq = self._seq
        self.state.loading = True
        self.state.error = None
        await self._notify()

        logger.debug("Weather fetch #%d for %s (%s, %s)", seq, candidate.label, candidate.latitude, candidate.longitude)
        try:
            forecast = await get_current_weather(self.http_client, candidate.latitude, candidate.longitude)
            snapshot = build_snapshot(forecast, candidate)
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning("Weather fetch for %s failed: %s", candidate.label, e)
            return await self._fail(seq)
        except Exception:
            logger.exception("Weather fetch for %s failed unexpectedly", candidate.label)
            return await self._fail(seq)

        if seq != self._seq:
            logger.debug("Discarding stale weather result #%d (latest is #%d)", seq, self._seq)
            return None
        self.state.snapshot = snapshot
        self.state.loading = False
        await self._notify()
        return snapshot

    async def _fail(self, seq: int) -> None:
        if seq != self._seq:
            logger.debug("Ignoring failure of superseded weather fetch #%d", seq)
            return None
        self.state.snapshot = None
        self.state.error = FETCH_ERROR_MESSAGE
        self.state.loading = False
        await self._notify()
        return None

    async def _notify(self) -> None:
        if self.on_change is not None:
            await self.on_change()
