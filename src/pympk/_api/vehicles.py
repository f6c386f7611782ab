"""Vehicle position endpoint.

The feed takes a single form field ``r`` holding the upper-cased line
identifier and answers with an XML vehicle list.
"""

from __future__ import annotations

import logging

from pympk._transport import Transport
from pympk.exceptions import MpkTransportError

_logger = logging.getLogger(__name__)


def normalize_line(line: str) -> str:
    """Return the line identifier as the feed expects it (upper-cased)."""
    return line.upper()


def build_request_body(line: str) -> bytes:
    """Build the ``r=<LINE>`` form body. No escaping is applied."""
    return f"r={normalize_line(line)}".encode()


async def fetch_vehicle_feed(transport: Transport, line: str) -> bytes:
    """Fetch the raw feed payload for *line*.

    Raises
    ------
    MpkTransportError
        On network failure, timeout or a non-2xx status.
    """
    try:
        return await transport.post_form(build_request_body(line))
    except MpkTransportError as exc:
        exc.line = normalize_line(line)
        _logger.debug("Feed request for line %s failed: %s", exc.line, exc)
        raise
