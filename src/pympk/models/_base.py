"""Base model shared by every pympk value type.

Models are frozen so a snapshot handed to a renderer can never be
mutated by a later poll cycle.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MpkBaseModel(BaseModel):
    """Frozen pydantic model that rejects unknown fields."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
