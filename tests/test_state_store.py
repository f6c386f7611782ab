from __future__ import annotations

from datetime import UTC, datetime

from pympk.map_delegate import VehicleMapDelegate
from pympk.models import Coordinate, FailureKind, FeedResult, VehicleRecord
from pympk.state.events import FeedEvent
from pympk.state.policy import should_accept_update
from pympk.state.store import ViewStateStore


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def _vehicle(lat: float, lon: float, vehicle_id: str) -> VehicleRecord:
    return VehicleRecord(coordinate=Coordinate(latitude=lat, longitude=lon), vehicle_id=vehicle_id)


def _event(sequence: int, result: FeedResult, line: str = "86") -> FeedEvent:
    return FeedEvent(line=line, sequence=sequence, observed_at=_dt(), result=result)


def test_policy_accepts_first_and_strictly_newer_only() -> None:
    assert should_accept_update(cached_sequence=None, incoming_sequence=1)
    assert should_accept_update(cached_sequence=1, incoming_sequence=2)
    assert not should_accept_update(cached_sequence=2, incoming_sequence=2)
    assert not should_accept_update(cached_sequence=3, incoming_sequence=2)


def test_event_line_is_upper_cased() -> None:
    assert _event(1, FeedResult.success([]), line="14a").line == "14A"


def test_success_replaces_vehicles_and_sets_viewport() -> None:
    store = ViewStateStore("86")

    store.apply(_event(1, FeedResult.success([_vehicle(51.7, 19.4, "A")])))
    store.apply(_event(2, FeedResult.success([_vehicle(51.0, 19.0, "B"), _vehicle(52.0, 20.0, "C")])))

    state = store.state
    assert [v.vehicle_id for v in state.vehicles] == ["B", "C"]
    assert state.vehicle_count == 2
    assert state.error_message is None
    assert state.viewport is not None
    assert state.viewport.center == Coordinate(latitude=51.5, longitude=19.5)
    assert [p.vehicle_id for p in state.pins(VehicleMapDelegate())] == ["B", "C"]
    assert state.title == "Linia: 86"


def test_failure_sets_no_data_and_clears_vehicles() -> None:
    store = ViewStateStore("86")
    store.apply(_event(1, FeedResult.success([_vehicle(51.7, 19.4, "A")])))
    viewport = store.state.viewport

    store.apply(_event(2, FeedResult.failed(FailureKind.TRANSPORT, "timeout")))

    state = store.state
    assert state.error_message == "no data"
    assert state.failure is FailureKind.TRANSPORT
    assert state.vehicles == ()
    assert state.pins(VehicleMapDelegate()) == ()
    assert state.viewport == viewport


def test_success_after_failure_clears_error() -> None:
    store = ViewStateStore("86", no_data_message="Brak danych")
    store.apply(_event(1, FeedResult.failed(FailureKind.NO_RECORDS, "none")))
    assert store.state.error_message == "Brak danych"

    store.apply(_event(2, FeedResult.success([_vehicle(51.7, 19.4, "A")])))

    assert store.state.error_message is None
    assert store.state.failure is None


def test_empty_success_keeps_previous_viewport() -> None:
    store = ViewStateStore("86")
    store.apply(_event(1, FeedResult.success([_vehicle(51.7, 19.4, "A")])))
    viewport = store.state.viewport

    store.apply(_event(2, FeedResult.success([])))

    assert store.state.vehicles == ()
    assert store.state.error_message is None
    assert store.state.viewport == viewport


def test_empty_success_on_fresh_store_has_no_viewport() -> None:
    store = ViewStateStore("86")

    assert store.apply(_event(1, FeedResult.success([])))
    assert store.state.viewport is None


def test_stale_response_is_discarded() -> None:
    store = ViewStateStore("86")
    store.apply(_event(2, FeedResult.success([_vehicle(51.7, 19.4, "NEW")])))

    applied = store.apply(_event(1, FeedResult.success([_vehicle(51.0, 19.0, "OLD")])))

    assert applied is False
    assert [v.vehicle_id for v in store.state.vehicles] == ["NEW"]
    assert store.state.sequence == 2


def test_event_for_other_line_is_ignored() -> None:
    store = ViewStateStore("86")

    assert store.apply(_event(1, FeedResult.success([_vehicle(51.7, 19.4, "A")]), line="14")) is False
    assert store.state.vehicles == ()


def test_pins_follow_the_map_delegate() -> None:
    store = ViewStateStore("86")
    store.apply(_event(1, FeedResult.success([_vehicle(51.7, 19.4, "A"), _vehicle(51.8, 19.5, "B")])))

    pins = store.state.pins(VehicleMapDelegate(tint="systemRed"))

    assert [(p.vehicle_id, p.tint, p.glyph) for p in pins] == [("A", "systemRed", "bus"), ("B", "systemRed", "bus")]
