"""Single-value async cache with a TTL and single-flight refreshes."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Generic, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


class SingleFlightTTLCache(Generic[T]):
    """Memoizes the result of an async ``fetcher`` for ``ttl_ms`` milliseconds.

    Callers that miss the cache while a fetch is running join that fetch
    instead of starting another one, so every joined caller sees the same
    value or the same exception. Failures are never cached and never retried.

    The fetch runs as its own task and callers await it through
    ``asyncio.shield``: a cancelled caller does not cancel the fetch.
    """

    def __init__(self, ttl_ms: int, fetcher: Callable[[], Awaitable[T]]) -> None:
        if isinstance(ttl_ms, bool) or not isinstance(ttl_ms, int) or ttl_ms <= 0:
            raise ValueError(f"ttl_ms must be a positive integer, got {ttl_ms!r}")
        self._ttl_ms = ttl_ms
        self._fetcher = fetcher
        self._value: T | None = None
        self._fetched_at: float | None = None
        self._in_flight: asyncio.Task[T] | None = None
        # Fetches dropped by reset() still run to completion.
        self._detached: set[asyncio.Task[T]] = set()

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def fetched_at(self) -> float | None:
        """Monotonic timestamp of the last successful fetch, if any."""
        return self._fetched_at

    @property
    def in_flight(self) -> bool:
        return self._in_flight is not None

    @property
    def is_fresh(self) -> bool:
        if self._fetched_at is None:
            return False
        elapsed_ms = (time.monotonic() - self._fetched_at) * 1000
        return elapsed_ms < self._ttl_ms

    async def get(self) -> T:
        """Return the cached value, joining or starting a fetch on a miss."""
        if self.is_fresh:
            return self._value  # type: ignore[return-value]

        task = self._in_flight
        if task is None:
            if self._fetched_at is not None:
                # Expired values are not served once a refresh starts.
                self._clear_value()
            task = self._start_fetch()
        else:
            log.debug("Joining in-flight fetch %r", task)
        return await asyncio.shield(task)

    def invalidate(self) -> None:
        """Drop the cached value. A running fetch is left alone."""
        self._clear_value()

    def reset(self) -> None:
        """Drop the cached value and stop tracking any running fetch."""
        self._clear_value()
        task = self._in_flight
        if task is not None:
            log.debug("Detaching in-flight fetch %r", task)
            self._detached.add(task)
            task.add_done_callback(self._detached.discard)
        self._in_flight = None

    def _clear_value(self) -> None:
        self._value = None
        self._fetched_at = None

    def _start_fetch(self) -> asyncio.Task[T]:
        task = asyncio.ensure_future(self._fetcher())
        self._in_flight = task
        # Registered before any waiter, so state is settled before they resume.
        task.add_done_callback(self._on_fetch_done)
        log.debug("Started fetch %r", task)
        return task

    def _on_fetch_done(self, task: asyncio.Task[T]) -> None:
        if task.cancelled():
            if self._in_flight is task:
                self._in_flight = None
            return

        # Marks the exception as retrieved even when nobody awaits it.
        exc = task.exception()
        if self._in_flight is not task:
            return
        self._in_flight = None
        if exc is None:
            self._value = task.result()
            self._fetched_at = time.monotonic()
