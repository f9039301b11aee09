"""Event emitted after a location proof is created."""

from __future__ import annotations

from nearme_proof.models._base import ProofBaseModel, ScaledLatitude, ScaledLongitude, UnixTimestamp


class LocationVerifiedEvent(ProofBaseModel):
    """Notification for indexers and monitors.

    Carries no authority; consumers must read the store for the
    authoritative record.
    """

    lat: ScaledLatitude
    lng: ScaledLongitude
    timestamp: UnixTimestamp
