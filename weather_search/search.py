# ABOUTME: Search-as-you-type controller turning keystrokes into location suggestions.
# ABOUTME: Debounces input, queries geocoding, and discards out-of-order responses.

import logging
from collections.abc import Awaitable, Callable

import httpx

from weather_search import config
from weather_search.debounce import Debouncer
from weather_search.models import LocationCandidate, SearchQueryState
from weather_search.weather_service import search_locations

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2

Listener = Callable[[], Awaitable[None]]


class SearchController:
    """Owns the search box state for one session.

    Suggestions are best-effort: any failed lookup leaves an empty list and no
    user-visible error.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        debounce_seconds: float | None = None,
        on_change: Listener | None = None,
    ):
        self.http_client = http_client
        self.state = SearchQueryState()
        self.on_change = on_change
        self._debouncer = Debouncer(config.SEARCH_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds)
        self._seq = 0

    @property
    def top_candidate(self) -> LocationCandidate | None:
        return self.state.candidates[0] if self.state.candidates else None

    def on_input_change(self, text: str) -> None:
        """Record the new input and schedule a lookup once typing pauses."""
        self.state.raw_input = text
        if len(text) < MIN_QUERY_LENGTH:
            self._debouncer.cancel()
            self._seq += 1
            self.state.candidates = []
            self.state.is_loading = False
            return
        self._debouncer.call(self.lookup, text)

    async def lookup(self, text: str) -> None:
        """Query geocoding for `text` and replace the suggestions, unless a newer lookup was issued."""
        if len(text) < MIN_QUERY_LENGTH:
            self._seq += 1
            self.state.candidates = []
            await self._notify()
            return

        self._seq += 1
        seq = self._seq
        self.state.is_loading = True
        logger.debug("Geocoding lookup #%d for %r", seq, text)
        try:
            candidates = await search_locations(self.http_client, text)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Geocoding lookup for %r failed: %s", text, e)
            candidates = []

        if seq != self._seq:
            logger.debug("Discarding stale geocoding result #%d (latest is #%d)", seq, self._seq)
            return
        self.state.candidates = candidates
        self.state.is_loading = False
        await self._notify()

    def clear_suggestions(self) -> None:
        self._seq += 1
        self.state.candidates = []
        self.state.is_loading = False

    def cancel_pending(self) -> None:
        self._debouncer.cancel()

    async def wait_idle(self) -> None:
        """Wait for any scheduled or running lookup to finish."""
        await self._debouncer.wait()

    def close(self) -> None:
        self._debouncer.close()

    async def _notify(self) -> None:
        if self.on_change is not None:
            await self.on_change()
