"""Periodic polling of one line's vehicle positions.

A :class:`LinePoller` is either idle or active. Activating it runs one
fetch/parse/update cycle straight away and then one every ``interval``
seconds until it is deactivated. Cycles are not serialized: a slow request
may still be running when the next one starts, and the store discards any
response older than the last one applied.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from enum import StrEnum
from typing import Any

from pympk._constants import DEFAULT_POLL_INTERVAL, NO_DATA_MESSAGE
from pympk.exceptions import MpkError, MpkFeedError, MpkNoRecordsError
from pympk.models.feed import FailureKind, FeedResult
from pympk.models.vehicle import VehicleRecord
from pympk.state.events import FeedEvent
from pympk.state.store import ViewState, ViewStateStore

_logger = logging.getLogger(__name__)

FetchVehicles = Callable[[str], Awaitable[Sequence[VehicleRecord]]]


class PollerState(StrEnum):
    IDLE = "idle"
    ACTIVE = "active"


def failure_kind(exc: MpkError) -> FailureKind:
    """Map a library error onto the failure reported to the UI."""
    if isinstance(exc, MpkNoRecordsError):
        return FailureKind.NO_RECORDS
    if isinstance(exc, MpkFeedError):
        return FailureKind.DECODE
    return FailureKind.TRANSPORT


async def fetch_result(fetch: FetchVehicles, line: str) -> FeedResult:
    """Run *fetch* and fold any error into a failed :class:`FeedResult`."""
    try:
        vehicles = await fetch(line)
    except MpkError as exc:
        _logger.debug("Fetch for line %s failed", line, exc_info=True)
        return FeedResult.failed(failure_kind(exc), str(exc))
    except Exception as exc:
        _logger.warning("Unexpected error fetching line %s", line, exc_info=True)
        return FeedResult.failed(FailureKind.TRANSPORT, str(exc) or type(exc).__name__)
    return FeedResult.success(tuple(vehicles))


class LinePoller:
    """Drives the fetch/parse/update cycle for a single line.

    Usage::

        poller = LinePoller(client.get_vehicles, "86", on_update=render)
        poller.activate()
        ...
        poller.deactivate()
    """

    def __init__(
        self,
        fetch: FetchVehicles,
        line: str,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
        store: ViewStateStore | None = None,
        on_update: Callable[[ViewState], None] | None = None,
        no_data_message: str = NO_DATA_MESSAGE,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._fetch = fetch
        self._line = line.upper()
        self._interval = interval
        self._store = store if store is not None else ViewStateStore(self._line, no_data_message=no_data_message)
        self._on_update = on_update
        self._state = PollerState.IDLE
        self._timer: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[Any]] = set()
        self._sequence = 0
        # Bumped on every deactivation; cycles started under an older
        # generation must not touch the store.
        self._generation = 0

    @property
    def line(self) -> str:
        return self._line

    @property
    def state(self) -> PollerState:
        return self._state

    @property
    def view_state(self) -> ViewState:
        return self._store.state

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """Start polling. No-op when already active."""
        if self._state is PollerState.ACTIVE:
            return
        loop = asyncio.get_running_loop()
        self._state = PollerState.ACTIVE
        self._timer = loop.create_task(self._timer_loop(self._generation))
        _logger.debug("Polling line %s every %.1fs", self._line, self._interval)

    def deactivate(self) -> None:
        """Stop polling and drop any cycle still in flight. Idempotent."""
        if self._state is PollerState.IDLE:
            return
        self._state = PollerState.IDLE
        self._generation += 1
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        for task in self._in_flight:
            task.cancel()
        _logger.debug("Stopped polling line %s", self._line)

    async def __aenter__(self) -> LinePoller:
        self.activate()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        pending = [task for task in (self._timer, *self._in_flight) if task is not None]
        self.deactivate()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    # ------------------------------------------------------------------
    # Cycles
    # ------------------------------------------------------------------

    async def run_cycle(self) -> bool:
        """Run one fetch/parse/update cycle now.

        Returns whether the outcome was applied to the view state.
        """
        return await self._cycle(self._generation)

    async def _timer_loop(self, generation: int) -> None:
        while True:
            self._spawn_cycle(generation)
            await asyncio.sleep(self._interval)

    def _spawn_cycle(self, generation: int) -> None:
        task = asyncio.get_running_loop().create_task(self._cycle(generation))
        self._in_flight.add(task)
        task.add_done_callback(self._cycle_done)

    def _cycle_done(self, task: asyncio.Task[Any]) -> None:
        self._in_flight.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.error("Poll cycle for line %s crashed", self._line, exc_info=exc)

    async def _cycle(self, generation: int) -> bool:
        self._sequence += 1
        sequence = self._sequence

        result = await fetch_result(self._fetch, self._line)

        if generation != self._generation:
            _logger.debug("Dropping response seq=%d for deactivated poller", sequence)
            return False

        applied = self._store.apply(FeedEvent(line=self._line, sequence=sequence, result=result))
        if applied and self._on_update is not None:
            self._on_update(self._store.state)
        return applied
