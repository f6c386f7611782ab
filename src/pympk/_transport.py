"""HTTP transport for the vehicle position feed."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import aiohttp

from pympk._constants import FORM_CONTENT_TYPE
from pympk.config import MpkConfig
from pympk.exceptions import MpkTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def post_form(self, body: bytes) -> bytes:
        ...


class HttpTransport:
    """Posts form bodies to the configured feed URL and returns the raw reply."""

    def __init__(self, config: MpkConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = (
            aiohttp.ClientTimeout(total=config.request_timeout) if config.request_timeout is not None else None
        )

    async def post_form(self, body: bytes) -> bytes:
        """POST *body* to the feed and return the response bytes.

        Any 2xx status is accepted; the feed's own status-code semantics are
        not interpreted further.
        """
        url = self._config.feed_url
        headers = {"content-type": FORM_CONTENT_TYPE}

        _logger.debug("POST %s body=%r", url, body)

        kwargs = {} if self._timeout is None else {"timeout": self._timeout}
        try:
            async with self._http.post(url, data=body, headers=headers, **kwargs) as resp:
                payload = await resp.read()
                if not 200 <= resp.status < 300:
                    raise MpkTransportError(
                        f"HTTP {resp.status} from {url}: {payload[:200]!r}",
                        status_code=resp.status,
                    )
        except MpkTransportError:
            raise
        except asyncio.TimeoutError as exc:
            raise MpkTransportError(f"Request to {url} timed out") from exc
        except aiohttp.ClientError as exc:
            raise MpkTransportError(f"Request to {url} failed: {exc}") from exc

        _logger.debug("Received %d bytes from %s", len(payload), url)
        return payload
