"""Base model shared by nearme_proof models.

Every model is frozen: a proof, once built, is never mutated in place.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from nearme_proof._constants import I64_MAX, I64_MIN, LAT_MAX, LAT_MIN, LNG_MAX, LNG_MIN

ScaledLatitude = Annotated[int, Field(ge=LAT_MIN, le=LAT_MAX, strict=True)]
"""Latitude in degrees × 1,000,000."""

ScaledLongitude = Annotated[int, Field(ge=LNG_MIN, le=LNG_MAX, strict=True)]
"""Longitude in degrees × 1,000,000."""

UnixTimestamp = Annotated[int, Field(ge=I64_MIN, le=I64_MAX, strict=True)]
"""Signed 64-bit epoch seconds."""


def timestamp_to_datetime(value: int) -> datetime:
    return datetime.fromtimestamp(value, tz=UTC)


class ProofBaseModel(BaseModel):
    """Frozen model that rejects unknown fields."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )
