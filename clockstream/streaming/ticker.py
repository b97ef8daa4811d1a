"""ClockTicker — per-connection generator that yields the time every interval."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import AsyncGenerator, Callable

from .events import clock_event, local_now


class ClockTicker:
    """Produces SSE clock events every ``interval`` seconds.

    Each call to events() is an independent stream. ``active`` and ``sent``
    count open streams and delivered events across all of them.
    """

    def __init__(self, interval: float = 2.0, clock: Callable[[], datetime] = local_now) -> None:
        self.interval = interval
        self._clock = clock
        self.active = 0
        self.sent = 0

    async def events(self) -> AsyncGenerator[str, None]:
        """Async generator yielding SSE strings until the consumer stops iterating.

        Closing or cancelling the generator (client disconnect, shutdown)
        ends the loop at its current await.
        """
        self.active += 1
        try:
            while True:
                yield clock_event(self._clock()).to_sse_string()
                self.sent += 1
                await asyncio.sleep(self.interval)
        finally:
            self.active -= 1
