"""Tests for the frozen proof models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from nearme_proof.models import LocationProof, LocationVerifiedEvent, ProofAddress, ProofState


class TestLocationProof:
    def test_degree_accessors(self) -> None:
        proof = LocationProof(lat=37_774_900, lng=-122_419_400, verified_at=1_700_000_000, bump=254)
        assert proof.latitude == pytest.approx(37.7749)
        assert proof.longitude == pytest.approx(-122.4194)
        assert proof.verified_datetime == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)

    def test_is_frozen(self) -> None:
        proof = LocationProof(lat=0, lng=0, verified_at=0, bump=1)
        with pytest.raises(ValidationError):
            proof.lat = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        "fields",
        [
            {"lat": 90_000_001, "lng": 0, "verified_at": 0, "bump": 1},
            {"lat": 0, "lng": -180_000_001, "verified_at": 0, "bump": 1},
            {"lat": 0, "lng": 0, "verified_at": 0, "bump": 256},
            {"lat": 1.5, "lng": 0, "verified_at": 0, "bump": 1},
            {"lat": "1", "lng": 0, "verified_at": 0, "bump": 1},
        ],
    )
    def test_rejects_out_of_range_or_loose_types(self, fields: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            LocationProof(**fields)  # type: ignore[arg-type]

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            LocationProof(lat=0, lng=0, verified_at=0, bump=1, merchant="x")  # type: ignore[call-arg]


class TestProofAddress:
    def test_key_length_checked(self) -> None:
        with pytest.raises(ValidationError):
            ProofAddress(key=b"\x00" * 31, bump=255, merchant_id="m")

    def test_key_hex(self) -> None:
        address = ProofAddress(key=b"\xab" * 32, bump=255, merchant_id="m")
        assert address.key_hex == "ab" * 32


def test_event_json_shape() -> None:
    event = LocationVerifiedEvent(lat=-1, lng=2, timestamp=3)
    assert event.model_dump() == {"lat": -1, "lng": 2, "timestamp": 3}


def test_closed_state_is_distinct_value() -> None:
    assert ProofState.CLOSED.value == "closed"
    assert {s.value for s in ProofState} == {"nonexistent", "verified", "closed"}
