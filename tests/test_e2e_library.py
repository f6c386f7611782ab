from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field

import pytest

from pympk.client import MpkClient
from pympk.config import MpkConfig
from pympk.exceptions import MpkError, MpkNoRecordsError, MpkTransportError
from pympk.models import FailureKind
from pympk.state.store import ViewState


def _point(vehicle_id: str, lat: float, lon: float) -> str:
    return f"<p>1, {vehicle_id}, 86, x, x, x, x, x, x, {lon}, {lat}</p>"


@dataclass
class FakeFeedBackend:
    """In-memory transport answering with scripted feed payloads."""

    responses: list[bytes | Exception] = field(default_factory=list)
    bodies: list[bytes] = field(default_factory=list)

    async def post_form(self, body: bytes) -> bytes:
        self.bodies.append(body)
        response = self.responses[min(len(self.bodies) - 1, len(self.responses) - 1)]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.mark.asyncio
async def test_get_vehicles_parses_feed_and_sends_line() -> None:
    backend = FakeFeedBackend(responses=[f"<VL>{_point('1234', 51.77, 19.47)}</VL>".encode()])

    async with MpkClient(transport=backend) as client:
        vehicles = await client.get_vehicles("86")

    assert backend.bodies == [b"r=86"]
    assert len(vehicles) == 1
    assert vehicles[0].vehicle_id == "1234"
    assert vehicles[0].coordinate.latitude == 51.77
    assert vehicles[0].coordinate.longitude == 19.47


@pytest.mark.asyncio
async def test_get_vehicles_raises_on_structural_absence() -> None:
    backend = FakeFeedBackend(responses=[b"<VL/>"])

    async with MpkClient(transport=backend) as client:
        with pytest.raises(MpkNoRecordsError):
            await client.get_vehicles("86")


@pytest.mark.asyncio
async def test_fetch_reports_each_failure_kind() -> None:
    backend = FakeFeedBackend(
        responses=[
            MpkTransportError("connection refused"),
            b"not xml",
            b"<VL></VL>",
            b"<VL><p>too, short</p></VL>",
        ]
    )

    async with MpkClient(transport=backend) as client:
        transport = await client.fetch("86")
        decode = await client.fetch("86")
        absent = await client.fetch("86")
        empty = await client.fetch("86")

    assert transport.failure is FailureKind.TRANSPORT
    assert decode.failure is FailureKind.DECODE
    assert absent.failure is FailureKind.NO_RECORDS
    assert empty.ok and empty.vehicles == ()


@pytest.mark.asyncio
async def test_client_requires_context_manager() -> None:
    client = MpkClient()

    with pytest.raises(MpkError):
        await client.get_vehicles("86")


@pytest.mark.asyncio
async def test_poller_renders_updates_then_no_data() -> None:
    backend = FakeFeedBackend(
        responses=[
            f"<VL>{_point('A', 0.0, 0.0)}{_point('B', 1.0, 1.0)}</VL>".encode(),
            b"<html>maintenance</html>",
        ]
    )
    updates: list[ViewState] = []
    config = MpkConfig(poll_interval=0.03, no_data_message="Brak danych")

    async with MpkClient(config, transport=backend) as client:
        async with client.create_poller("86", on_update=updates.append):
            deadline = time.monotonic() + 2.0
            while len(updates) < 2 and time.monotonic() < deadline:
                await asyncio.sleep(0.005)

    first, second = updates[0], updates[1]
    assert first.vehicle_count == 2
    assert first.viewport is not None
    assert first.viewport.center.latitude == 0.5
    assert first.viewport.span.latitude_delta == pytest.approx(1.1)
    assert second.error_message == "Brak danych"
    assert second.failure is FailureKind.NO_RECORDS
    assert second.vehicles == ()
    assert second.viewport == first.viewport
