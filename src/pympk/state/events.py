"""Completed poll cycle events."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pympk.models.feed import FeedResult


class FeedEvent(BaseModel):
    """The outcome of one poll cycle, tagged with its request sequence."""

    model_config = ConfigDict(frozen=True)

    line: str = Field(..., description="Upper-cased line identifier")
    sequence: int = Field(..., ge=0, description="Monotonic request sequence number")
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    result: FeedResult

    @field_validator("line")
    @classmethod
    def _normalize_line(cls, value: str) -> str:
        return value.upper()

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
