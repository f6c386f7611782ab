"""Custom exception hierarchy for pympk."""

from __future__ import annotations


class MpkError(Exception):
    """Base exception for all pympk errors."""


class MpkConfigError(MpkError):
    """Invalid or missing configuration."""


class MpkTransportError(MpkError):
    """HTTP-level failure (network, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        line: str = "",
    ) -> None:
        self.status_code = status_code
        self.line = line
        super().__init__(message)


class MpkFeedError(MpkError):
    """The feed answered but its payload could not be used."""


class MpkDecodeError(MpkFeedError):
    """Response body is not UTF-8 text or not well-formed XML."""


class MpkNoRecordsError(MpkFeedError):
    """XML decoded but contains no ``VL/p`` vehicle elements.

    Distinct from a feed listing vehicle elements that all fail record
    validation, which is an empty success.
    """
