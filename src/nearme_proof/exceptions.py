"""Custom exception hierarchy for nearme_proof."""

from __future__ import annotations

from typing import ClassVar


class ProofError(Exception):
    """Base exception for all nearme_proof errors."""


class ProofConfigError(ProofError):
    """Invalid or missing configuration."""


class ProofCodecError(ProofError):
    """Record or event bytes could not be encoded/decoded."""


class ProofDerivationError(ProofError):
    """No valid derived address exists for the given seeds."""


class ProofEventError(ProofError):
    """An event sink could not deliver an event."""


class ProofTransportError(ProofError):
    """HTTP-level failure talking to the host runtime (network, 5xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class ProofOperationError(ProofError):
    """A create/close call was rejected.

    ``code`` is a stable identifier callers can switch on; it does not
    change between releases.
    """

    code: ClassVar[str] = ""

    def __init__(self, message: str, *, merchant_id: str = "") -> None:
        self.merchant_id = merchant_id
        super().__init__(message)


class ProofValidationError(ProofOperationError):
    """Input rejected before any store interaction.

    Safe to retry with corrected input.
    """


class InvalidMerchantIdError(ProofValidationError):
    """Merchant identifier is not a string."""

    code = "InvalidMerchantId"


class MerchantIdTooLongError(ProofValidationError):
    """Merchant identifier is longer than 32 bytes."""

    code = "MerchantIdTooLong"


class InvalidLatitudeError(ProofValidationError):
    """Latitude is outside -90..+90 degrees (× 1,000,000)."""

    code = "InvalidLatitude"

    def __init__(self, message: str, *, value: object = None, merchant_id: str = "") -> None:
        self.value = value
        super().__init__(message, merchant_id=merchant_id)


class InvalidLongitudeError(ProofValidationError):
    """Longitude is outside -180..+180 degrees (× 1,000,000)."""

    code = "InvalidLongitude"

    def __init__(self, message: str, *, value: object = None, merchant_id: str = "") -> None:
        self.value = value
        super().__init__(message, merchant_id=merchant_id)


class ProofStateError(ProofOperationError):
    """The call conflicts with the current durable state.

    Read the current state before retrying.
    """


class ProofAlreadyExistsError(ProofStateError):
    """A live proof already exists for this merchant."""

    code = "AlreadyExists"


class ProofNotFoundError(ProofStateError):
    """No live proof exists for this merchant."""

    code = "NotFound"


class UnauthorizedError(ProofOperationError):
    """Caller identity does not match the identity allowed to act on the proof.

    Never retry with the same caller identity.
    """

    code = "Unauthorized"
