"""pympk - Async Python client for MPK Łódź live vehicle positions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pympk")
except PackageNotFoundError:
    __version__ = "0+local"
from pympk.client import MpkClient
from pympk.config import MpkConfig
from pympk.exceptions import (
    MpkConfigError,
    MpkDecodeError,
    MpkError,
    MpkFeedError,
    MpkNoRecordsError,
    MpkTransportError,
)
from pympk.geometry import compute_viewport, focus_viewport
from pympk.ingestion import parse_vehicle_feed, parse_vehicle_record
from pympk.map_delegate import MapDelegate, VehicleMapDelegate
from pympk.models import (
    Coordinate,
    FailureKind,
    FeedResult,
    Span,
    VehiclePin,
    VehicleRecord,
    Viewport,
)
from pympk.poller import LinePoller, PollerState
from pympk.state import FeedEvent, ViewState, ViewStateStore

__all__ = [
    "__version__",
    "Coordinate",
    "FailureKind",
    "FeedEvent",
    "FeedResult",
    "LinePoller",
    "MapDelegate",
    "MpkClient",
    "MpkConfig",
    "MpkConfigError",
    "MpkDecodeError",
    "MpkError",
    "MpkFeedError",
    "MpkNoRecordsError",
    "MpkTransportError",
    "PollerState",
    "Span",
    "VehicleMapDelegate",
    "VehiclePin",
    "VehicleRecord",
    "ViewState",
    "ViewStateStore",
    "Viewport",
    "compute_viewport",
    "focus_viewport",
    "parse_vehicle_feed",
    "parse_vehicle_record",
]
