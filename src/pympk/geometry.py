"""Viewport computation for a set of vehicle positions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from pympk._constants import FOCUS_RADIUS_M, METERS_PER_DEGREE, REGION_PADDING, SINGLE_VEHICLE_SPAN
from pympk.models.region import Span, Viewport
from pympk.models.vehicle import Coordinate, VehicleRecord


def compute_viewport(
    records: Sequence[VehicleRecord],
    *,
    single_span: float = SINGLE_VEHICLE_SPAN,
    padding: float = REGION_PADDING,
) -> Viewport | None:
    """Return a viewport fitting every record, or ``None`` for no records.

    A single record is shown at a fixed ``single_span`` close-up. Several
    records get their bounding box scaled by ``padding`` around its
    midpoint. An axis on which all records coincide falls back to
    ``single_span`` since a span must stay positive. Longitudes are not
    wrapped across the antimeridian.
    """
    if not records:
        return None

    if len(records) == 1:
        return Viewport(
            center=records[0].coordinate,
            span=Span(latitude_delta=single_span, longitude_delta=single_span),
        )

    latitudes = [record.latitude for record in records]
    longitudes = [record.longitude for record in records]
    min_lat, max_lat = min(latitudes), max(latitudes)
    min_lon, max_lon = min(longitudes), max(longitudes)

    lat_delta = (max_lat - min_lat) * padding
    lon_delta = (max_lon - min_lon) * padding

    return Viewport(
        center=Coordinate(latitude=(min_lat + max_lat) / 2, longitude=(min_lon + max_lon) / 2),
        span=Span(
            latitude_delta=lat_delta if lat_delta > 0 else single_span,
            longitude_delta=lon_delta if lon_delta > 0 else single_span,
        ),
    )


def focus_viewport(coordinate: Coordinate, radius_m: float = FOCUS_RADIUS_M) -> Viewport:
    """Viewport ``radius_m`` metres tall and wide, centred on *coordinate*.

    Used when a pin is selected on the map.
    """
    lat_delta = radius_m / METERS_PER_DEGREE
    # Longitude degrees shrink towards the poles; clamp so the span stays finite.
    cos_lat = max(math.cos(math.radians(coordinate.latitude)), 1e-6)
    lon_delta = radius_m / (METERS_PER_DEGREE * cos_lat)
    return Viewport(
        center=coordinate,
        span=Span(latitude_delta=lat_delta, longitude_delta=lon_delta),
    )
