"""Outcome of one feed fetch."""

from __future__ import annotations

from enum import StrEnum

from pydantic import model_validator

from pympk.models._base import MpkBaseModel
from pympk.models.vehicle import VehicleRecord


class FailureKind(StrEnum):
    TRANSPORT = "transport"
    DECODE = "decode"
    NO_RECORDS = "no_records"


class FeedResult(MpkBaseModel):
    """Either an ordered vehicle list (possibly empty) or a failure.

    Use :meth:`success` and :meth:`failed` rather than the constructor.
    """

    vehicles: tuple[VehicleRecord, ...] = ()
    failure: FailureKind | None = None
    message: str | None = None

    @model_validator(mode="after")
    def _check_tag(self) -> FeedResult:
        if self.failure is not None and self.vehicles:
            raise ValueError("a failed FeedResult cannot carry vehicles")
        if self.failure is None and self.message is not None:
            raise ValueError("a successful FeedResult has no failure message")
        return self

    @classmethod
    def success(cls, vehicles: list[VehicleRecord] | tuple[VehicleRecord, ...]) -> FeedResult:
        return cls(vehicles=tuple(vehicles))

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> FeedResult:
        return cls(failure=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.failure is None
