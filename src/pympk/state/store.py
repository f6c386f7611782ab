"""Render state for one line.

This is the only component allowed to apply completed poll cycles.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from pympk._constants import NO_DATA_MESSAGE, REGION_PADDING, SINGLE_VEHICLE_SPAN
from pympk.geometry import compute_viewport
from pympk.map_delegate import MapDelegate
from pympk.models.feed import FailureKind
from pympk.models.region import Viewport
from pympk.models.vehicle import VehiclePin, VehicleRecord
from pympk.state.events import FeedEvent
from pympk.state.policy import should_accept_update

_logger = logging.getLogger(__name__)


class ViewState(BaseModel):
    """Everything the presentation layer needs to draw one line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    line: str
    vehicles: tuple[VehicleRecord, ...] = ()
    error_message: str | None = None
    failure: FailureKind | None = None
    viewport: Viewport | None = None
    sequence: int | None = None
    updated_at: datetime | None = None

    @property
    def title(self) -> str:
        return f"Linia: {self.line}"

    @property
    def vehicle_count(self) -> int:
        return len(self.vehicles)

    def pins(self, delegate: MapDelegate) -> tuple[VehiclePin, ...]:
        """Map annotations for the current vehicles, as described by *delegate*."""
        return tuple(delegate.pin_for(vehicle) for vehicle in self.vehicles)


class ViewStateStore:
    """Holds the latest :class:`ViewState` and applies :class:`FeedEvent` s.

    Every accepted event fully replaces the vehicle list. The viewport is
    recomputed only from a non-empty list; an empty or failed cycle keeps
    the previous viewport.
    """

    def __init__(
        self,
        line: str,
        *,
        no_data_message: str = NO_DATA_MESSAGE,
        single_span: float = SINGLE_VEHICLE_SPAN,
        padding: float = REGION_PADDING,
    ) -> None:
        self._no_data_message = no_data_message
        self._single_span = single_span
        self._padding = padding
        self._state = ViewState(line=line.upper())

    @property
    def state(self) -> ViewState:
        return self._state

    def apply(self, event: FeedEvent) -> bool:
        """Apply *event*; return ``False`` when it was discarded as stale."""
        if event.line != self._state.line:
            _logger.debug("Ignoring event for line %s (store tracks %s)", event.line, self._state.line)
            return False
        if not should_accept_update(cached_sequence=self._state.sequence, incoming_sequence=event.sequence):
            _logger.debug(
                "Discarding stale response seq=%d (applied seq=%s)",
                event.sequence,
                self._state.sequence,
            )
            return False

        result = event.result
        if result.ok:
            viewport = compute_viewport(result.vehicles, single_span=self._single_span, padding=self._padding)
            self._state = self._state.model_copy(
                update={
                    "vehicles": result.vehicles,
                    "error_message": None,
                    "failure": None,
                    "viewport": viewport if viewport is not None else self._state.viewport,
                    "sequence": event.sequence,
                    "updated_at": event.observed_at,
                }
            )
        else:
            self._state = self._state.model_copy(
                update={
                    "vehicles": (),
                    "error_message": self._no_data_message,
                    "failure": result.failure,
                    "sequence": event.sequence,
                    "updated_at": event.observed_at,
                }
            )
        return True
