"""Map widget capability interface.

Whatever owns the map widget implements :class:`MapDelegate` to describe
vehicle pins and react to pin selection.
"""

from __future__ import annotations

from typing import Protocol

from pympk._constants import FOCUS_RADIUS_M
from pympk.geometry import focus_viewport
from pympk.models.region import Viewport
from pympk.models.vehicle import VehiclePin, VehicleRecord


class MapDelegate(Protocol):
    def pin_for(self, record: VehicleRecord) -> VehiclePin:
        ...

    def select(self, pin: VehiclePin) -> Viewport:
        ...


class VehicleMapDelegate:
    """Blue bus markers; selecting one zooms to ``radius_m`` around it."""

    def __init__(self, *, radius_m: float = FOCUS_RADIUS_M, tint: str = "systemBlue") -> None:
        self._radius_m = radius_m
        self._tint = tint

    def pin_for(self, record: VehicleRecord) -> VehiclePin:
        return VehiclePin(
            vehicle_id=record.vehicle_id,
            coordinate=record.coordinate,
            glyph="bus",
            tint=self._tint,
            shows_callout=True,
        )

    def select(self, pin: VehiclePin) -> Viewport:
        return focus_viewport(pin.coordinate, self._radius_m)
