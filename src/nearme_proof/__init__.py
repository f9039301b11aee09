"""nearme_proof - Verified merchant location proof registry."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("nearme-proof")
except PackageNotFoundError:
    __version__ = "0+local"
from nearme_proof._crypto import ServerKeypair, derive_proof_address
from nearme_proof._mqtt import MqttEventSink
from nearme_proof.config import ProofConfig
from nearme_proof.events import CallbackSink, EventEmitter, EventSink
from nearme_proof.exceptions import (
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidMerchantIdError,
    MerchantIdTooLongError,
    ProofAlreadyExistsError,
    ProofCodecError,
    ProofConfigError,
    ProofDerivationError,
    ProofError,
    ProofEventError,
    ProofNotFoundError,
    ProofOperationError,
    ProofStateError,
    ProofTransportError,
    ProofValidationError,
    UnauthorizedError,
)
from nearme_proof.models import LocationProof, LocationVerifiedEvent, ProofAddress, ProofState
from nearme_proof.registry import ProofRegistry
from nearme_proof.store import HostRecordStore, InMemoryRecordStore, RecordStore, StoredRecord
from nearme_proof.validation import to_degrees, to_scaled

__all__ = [
    "__version__",
    "CallbackSink",
    "EventEmitter",
    "EventSink",
    "HostRecordStore",
    "InMemoryRecordStore",
    "InvalidLatitudeError",
    "InvalidLongitudeError",
    "InvalidMerchantIdError",
    "LocationProof",
    "LocationVerifiedEvent",
    "MerchantIdTooLongError",
    "MqttEventSink",
    "ProofAddress",
    "ProofAlreadyExistsError",
    "ProofCodecError",
    "ProofConfig",
    "ProofConfigError",
    "ProofDerivationError",
    "ProofError",
    "ProofEventError",
    "ProofNotFoundError",
    "ProofOperationError",
    "ProofRegistry",
    "ProofState",
    "ProofStateError",
    "ProofTransportError",
    "ProofValidationError",
    "RecordStore",
    "ServerKeypair",
    "StoredRecord",
    "UnauthorizedError",
    "derive_proof_address",
    "to_degrees",
    "to_scaled",
]
