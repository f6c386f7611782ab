"""Map viewport models."""

from __future__ import annotations

from pydantic import Field

from pympk.models._base import MpkBaseModel
from pympk.models.vehicle import Coordinate


class Span(MpkBaseModel):
    """Visible geographic extent in degrees. Both deltas are strictly positive."""

    latitude_delta: float = Field(gt=0, allow_inf_nan=False)
    longitude_delta: float = Field(gt=0, allow_inf_nan=False)


class Viewport(MpkBaseModel):
    """Map centre plus visible span."""

    center: Coordinate
    span: Span
