# ABOUTME: Trailing-edge debouncer built on asyncio timer handles.
# ABOUTME: Holds at most one pending timer; each new call replaces the previous one.

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Run an async callable once `delay` seconds have passed without another call.

    Only the timer is cancelled when a call is superseded. A callable that has already
    started keeps running; callers are expected to discard its result if it is stale.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """True while a timer is waiting to fire."""
        return self._handle is not None

    @property
    def running(self) -> bool:
        """True while a fired callable has not finished."""
        return bool(self._tasks)

    def call(self, func: Callable[..., Awaitable[object]], *args) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, func, args)

    def cancel(self) -> None:
        """Drop the pending timer, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self) -> None:
        """Drop the pending timer and cancel callables still running."""
        self.cancel()
        for task in list(self._tasks):
            task.cancel()

    async def wait(self) -> None:
        """Wait until no timer is pending and every fired callable has finished."""
        loop = asyncio.get_running_loop()
        while self._handle is not None or self._tasks:
            if self._tasks:
                await asyncio.wait(set(self._tasks))
            else:
                await asyncio.sleep(max(0.0, self._handle.when() - loop.time()))

    def _fire(self, func: Callable[..., Awaitable[object]], args: tuple) -> None:
        self._handle = None
        task = asyncio.get_running_loop().create_task(self._run(func, args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, func: Callable[..., Awaitable[object]], args: tuple) -> None:
        try:
            await func(*args)
        except Exception:
            logger.exception("Debounced call %r failed", func)
