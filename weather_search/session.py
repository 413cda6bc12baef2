# ABOUTME: Per-browser-session wiring between the search box and the weather panel.
# ABOUTME: Routes suggestion clicks and form submits to the weather controller and tracks in-flight tasks.

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx

from weather_search.models import LocationCandidate, WeatherSnapshot
from weather_search.search import SearchController
from weather_search.weather import WeatherController

logger = logging.getLogger(__name__)


class SearchSession:
    """One search controller and one weather controller sharing a change listener."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        debounce_seconds: float | None = None,
        on_change: Callable[[], Awaitable[None]] | None = None,
    ):
        self.on_change = on_change
        self.search = SearchController(http_client, debounce_seconds=debounce_seconds, on_change=self._notify)
        self.weather = WeatherController(http_client, on_change=self._notify)
        self._tasks: set[asyncio.Task] = set()

    def on_input_change(self, text: str) -> None:
        self.search.on_input_change(text)

    async def select(self, candidate: LocationCandidate) -> WeatherSnapshot | None:
        """Show weather for `candidate`; dismiss the suggestions once it arrives."""
        self.search.state.raw_input = candidate.label
        self.search.cancel_pending()
        snapshot = await self.weather.select_location(candidate)
        if snapshot is not None:
            self.search.clear_suggestions()
            await self._notify()
        return snapshot

    async def select_index(self, index: int, label: str | None = None) -> WeatherSnapshot | None:
        """Select the suggestion at `index`.

        When `label` is given it must match the suggestion currently at that index;
        a mismatch means the list was replaced after the page drew it, and the click is dropped.
        """
        candidates = self.search.state.candidates
        if not 0 <= index < len(candidates):
            logger.debug("Ignoring selection of suggestion %d out of %d", index, len(candidates))
            return None
        candidate = candidates[index]
        if label is not None and candidate.label != label:
            logger.debug("Ignoring selection of %r; suggestion %d is now %r", label, index, candidate.label)
            return None
        return await self.select(candidate)

    async def submit(self) -> WeatherSnapshot | None:
        """Select the top suggestion. Without suggestions, submitting does nothing."""
        candidate = self.search.top_candidate
        if candidate is None:
            return None
        return await self.select(candidate)

    def start_selection(self, index: int, label: str | None = None) -> asyncio.Task:
        return self._spawn(self.select_index(index, label))

    def start_submit(self) -> asyncio.Task:
        return self._spawn(self.submit())

    async def wait_idle(self) -> None:
        """Wait for pending lookups and in-flight selections to settle."""
        await self.search.wait_idle()
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    def close(self) -> None:
        self.search.close()
        for task in list(self._tasks):
            task.cancel()

    def _spawn(self, coro: Awaitable[WeatherSnapshot | None]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self._guarded(coro))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _guarded(self, coro: Awaitable[WeatherSnapshot | None]) -> WeatherSnapshot | None:
        try:
            return await coro
        except Exception:
            logger.exception("Selection task failed")
            return None

    async def _notify(self) -> None:
        if self.on_change is not None:
            await self.on_change()
