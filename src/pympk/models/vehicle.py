"""Vehicle position models."""

from __future__ import annotations

from pydantic import Field

from pympk.models._base import MpkBaseModel


class Coordinate(MpkBaseModel):
    """WGS-84 position in degrees.

    Parameters
    ----------
    latitude : float
        Latitude in degrees, finite.
    longitude : float
        Longitude in degrees, finite.
    """

    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)


class VehicleRecord(MpkBaseModel):
    """One vehicle position as reported by the feed."""

    coordinate: Coordinate
    vehicle_id: str
    """Vehicle identifier, free-form as reported by the feed."""

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude


class VehiclePin(MpkBaseModel):
    """Map annotation for one vehicle."""

    vehicle_id: str
    coordinate: Coordinate
    glyph: str = "bus"
    tint: str = "systemBlue"
    shows_callout: bool = True

    @property
    def title(self) -> str:
        return self.vehicle_id
