"""Input checks that run before any store interaction.

Coordinates are integers in degrees × 1,000,000. Latitude is checked
before longitude so doubly-invalid input always reports the latitude error.
"""

from __future__ import annotations

from nearme_proof._constants import (
    COORDINATE_SCALE,
    LAT_MAX,
    LAT_MIN,
    LNG_MAX,
    LNG_MIN,
    MAX_MERCHANT_ID_LEN,
)
from nearme_proof.exceptions import (
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidMerchantIdError,
    MerchantIdTooLongError,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_merchant_id(merchant_id: str) -> None:
    """Reject identifiers whose UTF-8 encoding exceeds 32 bytes."""
    if not isinstance(merchant_id, str):
        raise InvalidMerchantIdError(f"Merchant ID must be a string, got {type(merchant_id).__name__}")
    size = len(merchant_id.encode("utf-8"))
    if size > MAX_MERCHANT_ID_LEN:
        raise MerchantIdTooLongError(
            f"Merchant ID exceeds maximum length of {MAX_MERCHANT_ID_LEN} bytes (got {size})",
            merchant_id=merchant_id,
        )


def validate_latitude(lat: int) -> None:
    if not _is_int(lat) or not LAT_MIN <= lat <= LAT_MAX:
        raise InvalidLatitudeError(
            "Invalid latitude. Must be between -90 and +90 degrees (multiplied by 1,000,000)",
            value=lat,
        )


def validate_longitude(lng: int) -> None:
    if not _is_int(lng) or not LNG_MIN <= lng <= LNG_MAX:
        raise InvalidLongitudeError(
            "Invalid longitude. Must be between -180 and +180 degrees (multiplied by 1,000,000)",
            value=lng,
        )


def validate_coordinates(lat: int, lng: int) -> None:
    validate_latitude(lat)
    validate_longitude(lng)


def to_scaled(degrees: float) -> int:
    """Convert degrees to the stored integer form (6 decimal places)."""
    return round(degrees * COORDINATE_SCALE)


def to_degrees(scaled: int) -> float:
    return scaled / COORDINATE_SCALE
