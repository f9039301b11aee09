"""Fixed-width binary layouts for stored proofs and emitted events.

Record (33 bytes, little-endian)::

    discriminator  8  sha256("account:LocationProof")[:8]
    lat            8  i64
    lng            8  i64
    verified_at    8  i64
    bump           1  u8

Event (32 bytes)::

    discriminator  8  sha256("event:LocationVerifiedEvent")[:8]
    lat, lng, timestamp   3 × i64
"""

from __future__ import annotations

import struct

from pydantic import ValidationError

from nearme_proof._constants import ACCOUNT_DISCRIMINATOR, EVENT_DISCRIMINATOR
from nearme_proof.exceptions import ProofCodecError
from nearme_proof.models.events import LocationVerifiedEvent
from nearme_proof.models.proof import LocationProof

_PROOF_STRUCT = struct.Struct("<8sqqqB")
_EVENT_STRUCT = struct.Struct("<8sqqq")


def encode_proof(proof: LocationProof) -> bytes:
    try:
        return _PROOF_STRUCT.pack(ACCOUNT_DISCRIMINATOR, proof.lat, proof.lng, proof.verified_at, proof.bump)
    except struct.error as exc:
        raise ProofCodecError(f"cannot encode proof: {exc}") from exc


def decode_proof(data: bytes) -> LocationProof:
    """Decode a stored record, rejecting foreign or truncated bytes."""
    if len(data) != _PROOF_STRUCT.size:
        raise ProofCodecError(f"proof record must be {_PROOF_STRUCT.size} bytes, got {len(data)}")
    discriminator, lat, lng, verified_at, bump = _PROOF_STRUCT.unpack(data)
    if discriminator != ACCOUNT_DISCRIMINATOR:
        raise ProofCodecError("record discriminator does not match LocationProof")
    try:
        return LocationProof(lat=lat, lng=lng, verified_at=verified_at, bump=bump)
    except ValidationError as exc:
        # Out-of-bounds coordinates are never written; treat them as corruption.
        raise ProofCodecError(f"stored proof is invalid: {exc}") from exc


def encode_event(event: LocationVerifiedEvent) -> bytes:
    return _EVENT_STRUCT.pack(EVENT_DISCRIMINATOR, event.lat, event.lng, event.timestamp)


def decode_event(data: bytes) -> LocationVerifiedEvent:
    if len(data) != _EVENT_STRUCT.size:
        raise ProofCodecError(f"event must be {_EVENT_STRUCT.size} bytes, got {len(data)}")
    discriminator, lat, lng, timestamp = _EVENT_STRUCT.unpack(data)
    if discriminator != EVENT_DISCRIMINATOR:
        raise ProofCodecError("event discriminator does not match LocationVerifiedEvent")
    try:
        return LocationVerifiedEvent(lat=lat, lng=lng, timestamp=timestamp)
    except ValidationError as exc:
        raise ProofCodecError(f"event is invalid: {exc}") from exc
