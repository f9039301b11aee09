"""Data models for location proofs."""

from nearme_proof.models._base import ProofBaseModel, timestamp_to_datetime
from nearme_proof.models.events import LocationVerifiedEvent
from nearme_proof.models.proof import LocationProof, ProofAddress, ProofState

__all__ = [
    "LocationProof",
    "LocationVerifiedEvent",
    "ProofAddress",
    "ProofBaseModel",
    "ProofState",
    "timestamp_to_datetime",
]
