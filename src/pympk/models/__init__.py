"""Data models for the vehicle position feed."""

from pympk.models._base import MpkBaseModel
from pympk.models.feed import FailureKind, FeedResult
from pympk.models.region import Span, Viewport
from pympk.models.vehicle import Coordinate, VehiclePin, VehicleRecord

__all__ = [
    "Coordinate",
    "FailureKind",
    "FeedResult",
    "MpkBaseModel",
    "Span",
    "VehiclePin",
    "VehicleRecord",
    "Viewport",
]
