"""Location proof and proof address models."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated

from pydantic import Field, field_validator

from nearme_proof._constants import ADDRESS_LEN
from nearme_proof.models._base import (
    ProofBaseModel,
    ScaledLatitude,
    ScaledLongitude,
    UnixTimestamp,
    timestamp_to_datetime,
)
from nearme_proof.validation import to_degrees

Bump = Annotated[int, Field(ge=0, le=255, strict=True)]


class ProofState(enum.StrEnum):
    """Lifecycle of a merchant's proof slot.

    ``CLOSED`` behaves exactly like ``NONEXISTENT``: the slot can be
    created again. The store keeps no history, so
    :meth:`ProofRegistry.proof_state` never returns it; the member exists
    for callers that record their own close outcomes.
    """

    NONEXISTENT = "nonexistent"
    VERIFIED = "verified"
    CLOSED = "closed"


class ProofAddress(ProofBaseModel):
    """Derived storage address for one merchant's proof.

    Parameters
    ----------
    key : bytes
        32-byte derived address.
    bump : int
        Derivation nonce that produced ``key``. Stored with the proof and
        checked again on close.
    merchant_id : str
        The identifier the address was derived from.
    """

    key: bytes
    bump: Bump
    merchant_id: str

    @field_validator("key")
    @classmethod
    def _check_key_len(cls, value: bytes) -> bytes:
        if len(value) != ADDRESS_LEN:
            raise ValueError(f"key must be {ADDRESS_LEN} bytes")
        return value

    @property
    def key_hex(self) -> str:
        return self.key.hex()


class LocationProof(ProofBaseModel):
    """Immutable proof of a merchant's verified GPS location.

    Parameters
    ----------
    lat : int
        Latitude × 1,000,000.
    lng : int
        Longitude × 1,000,000.
    verified_at : int
        Unix timestamp set by the host clock at creation.
    bump : int
        Authorization token: the derivation nonce of the owning address.
    """

    lat: ScaledLatitude
    lng: ScaledLongitude
    verified_at: UnixTimestamp
    bump: Bump

    @property
    def latitude(self) -> float:
        return to_degrees(self.lat)

    @property
    def longitude(self) -> float:
        return to_degrees(self.lng)

    @property
    def verified_datetime(self) -> datetime:
        return timestamp_to_datetime(self.verified_at)
