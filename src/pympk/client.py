"""High-level async client for the MPK Łódź vehicle position feed."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from pympk._api.vehicles import fetch_vehicle_feed
from pympk._transport import HttpTransport, Transport
from pympk.config import MpkConfig
from pympk.exceptions import MpkError
from pympk.ingestion.feed import parse_vehicle_feed
from pympk.models.feed import FeedResult
from pympk.models.vehicle import VehicleRecord
from pympk.poller import LinePoller, fetch_result
from pympk.state.store import ViewState, ViewStateStore

_logger = logging.getLogger(__name__)


class MpkClient:
    """Async client for the vehicle position feed.

    Usage::

        async with MpkClient() as client:
            vehicles = await client.get_vehicles("86")
    """

    def __init__(
        self,
        config: MpkConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config if config is not None else MpkConfig()
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._transport = transport

    @property
    def config(self) -> MpkConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> MpkClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise MpkError("Client not initialized. Use 'async with MpkClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Feed
    # ------------------------------------------------------------------

    async def get_vehicles(self, line: str) -> list[VehicleRecord]:
        """Fetch and parse the current vehicle positions for *line*.

        Raises
        ------
        MpkTransportError
            The request failed.
        MpkDecodeError
            The response is not UTF-8 XML.
        MpkNoRecordsError
            The response lists no vehicle elements.
        """
        payload = await fetch_vehicle_feed(self._require_transport(), line)
        vehicles = parse_vehicle_feed(payload)
        _logger.debug("Line %s: %d vehicles", line.upper(), len(vehicles))
        return vehicles

    async def fetch(self, line: str) -> FeedResult:
        """Like :meth:`get_vehicles` but reports failures as a :class:`FeedResult`."""
        return await fetch_result(self.get_vehicles, line)

    def create_poller(
        self,
        line: str,
        *,
        on_update: Callable[[ViewState], None] | None = None,
    ) -> LinePoller:
        """Build an idle :class:`LinePoller` for *line* using this client's config."""
        store = ViewStateStore(
            line,
            no_data_message=self._config.no_data_message,
            single_span=self._config.single_vehicle_span,
            padding=self._config.region_padding,
        )
        return LinePoller(
            self.get_vehicles,
            line,
            interval=self._config.poll_interval,
            store=store,
            on_update=on_update,
        )
