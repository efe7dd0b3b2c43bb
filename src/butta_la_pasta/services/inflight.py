"""Per-barcode deduplication of concurrent enrichments."""

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from typing import Any

from butta_la_pasta.domain.pasta import CookingProfile

ProfileFactory = Callable[[], Coroutine[Any, Any, CookingProfile]]


@dataclass
class _Flight:
    task: "asyncio.Task[CookingProfile]"
    waiters: int = 0


@dataclass
class InFlightRegistry:
    """Share one running enrichment between concurrent callers for a key.

    Bound to a single event loop. The running task is cancelled once every
    caller waiting on it has been cancelled.
    """

    _flights: dict[str, _Flight] = field(default_factory=dict)

    async def run(self, key: str, factory: ProfileFactory) -> CookingProfile:
        """Await the enrichment for key, starting it if none is running."""
        flight = self._flights.get(key)
        if flight is None:
            flight = _Flight(task=asyncio.create_task(factory()))
            self._flights[key] = flight
            flight.task.add_done_callback(lambda _task: self._finish(key, flight))

        flight.waiters += 1
        try:
            return await asyncio.shield(flight.task)
        finally:
            flight.waiters -= 1
            if flight.waiters == 0 and not flight.task.done():
                flight.task.cancel()

    def in_flight(self, key: str) -> bool:
        """Return whether an enrichment for key is currently running."""
        return key in self._flights

    def _finish(self, key: str, flight: _Flight) -> None:
        if self._flights.get(key) is flight:
            del self._flights[key]
        # Every waiter may already be gone; mark a failure as retrieved.
        if not flight.task.cancelled():
            flight.task.exception()
