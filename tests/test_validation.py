"""Tests for coordinate and merchant id validation."""

from __future__ import annotations

import pytest

from nearme_proof.exceptions import (
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidMerchantIdError,
    MerchantIdTooLongError,
    ProofValidationError,
)
from nearme_proof.validation import (
    to_degrees,
    to_scaled,
    validate_coordinates,
    validate_merchant_id,
)

# ------------------------------------------------------------------
# Coordinates
# ------------------------------------------------------------------


class TestValidateCoordinates:
    @pytest.mark.parametrize(
        ("lat", "lng"),
        [
            (0, 0),
            (90_000_000, 180_000_000),
            (-90_000_000, -180_000_000),
            (37_774_900, -122_419_400),
        ],
    )
    def test_accepts_bounds_inclusive(self, lat: int, lng: int) -> None:
        validate_coordinates(lat, lng)

    def test_latitude_just_above_range(self) -> None:
        with pytest.raises(InvalidLatitudeError) as exc_info:
            validate_coordinates(90_000_001, 0)
        assert exc_info.value.code == "InvalidLatitude"
        assert exc_info.value.value == 90_000_001

    def test_latitude_just_below_range(self) -> None:
        with pytest.raises(InvalidLatitudeError):
            validate_coordinates(-90_000_001, 0)

    def test_longitude_just_below_range(self) -> None:
        with pytest.raises(InvalidLongitudeError) as exc_info:
            validate_coordinates(0, -180_000_001)
        assert exc_info.value.code == "InvalidLongitude"

    def test_longitude_just_above_range(self) -> None:
        with pytest.raises(InvalidLongitudeError):
            validate_coordinates(0, 180_000_001)

    def test_latitude_reported_first_when_both_invalid(self) -> None:
        with pytest.raises(InvalidLatitudeError):
            validate_coordinates(91_000_000, 181_000_000)

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(InvalidLatitudeError):
            validate_coordinates(1.5, 0)  # type: ignore[arg-type]
        with pytest.raises(InvalidLongitudeError):
            validate_coordinates(0, True)  # type: ignore[arg-type]

    def test_errors_are_validation_errors(self) -> None:
        with pytest.raises(ProofValidationError):
            validate_coordinates(2**63, 0)


# ------------------------------------------------------------------
# Merchant id
# ------------------------------------------------------------------


def test_merchant_id_of_32_bytes_accepted() -> None:
    validate_merchant_id("m" * 32)


def test_merchant_id_of_33_bytes_rejected() -> None:
    with pytest.raises(MerchantIdTooLongError) as exc_info:
        validate_merchant_id("m" * 33)
    assert exc_info.value.code == "MerchantIdTooLong"
    assert exc_info.value.merchant_id == "m" * 33


def test_merchant_id_length_counts_utf8_bytes() -> None:
    validate_merchant_id("é" * 16)
    with pytest.raises(MerchantIdTooLongError):
        validate_merchant_id("é" * 17)


@pytest.mark.parametrize("merchant_id", [None, 42, b"merchant"])
def test_non_string_merchant_id_rejected(merchant_id: object) -> None:
    with pytest.raises(InvalidMerchantIdError) as exc_info:
        validate_merchant_id(merchant_id)  # type: ignore[arg-type]
    assert isinstance(exc_info.value, ProofValidationError)
    assert exc_info.value.code == "InvalidMerchantId"


# ------------------------------------------------------------------
# Scale conversion
# ------------------------------------------------------------------


def test_to_scaled_rounds_to_six_decimals() -> None:
    assert to_scaled(37.7749) == 37_774_900
    assert to_scaled(-122.4194) == -122_419_400


def test_to_degrees() -> None:
    assert to_degrees(-90_000_000) == -90.0
    assert to_degrees(37_774_900) == pytest.approx(37.7749)
