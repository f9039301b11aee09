"""Proof registry: the create/close state machine.

Every call validates its input, derives the merchant's address and issues
exactly one store operation. Any failure leaves the store unchanged; the
store's atomic ``create_if_absent`` is what keeps one proof per merchant.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from nearme_proof._crypto.derivation import derive_proof_address
from nearme_proof._layout import encode_proof
from nearme_proof.config import ProofConfig
from nearme_proof.events import EventEmitter
from nearme_proof.exceptions import ProofOperationError, UnauthorizedError
from nearme_proof.models.events import LocationVerifiedEvent
from nearme_proof.models.proof import LocationProof, ProofAddress, ProofState
from nearme_proof.store.base import RecordStore, StoredRecord
from nearme_proof.validation import validate_coordinates, validate_merchant_id

_logger = logging.getLogger(__name__)


def _host_clock() -> int:
    return int(time.time())


class ProofRegistry:
    """Create, close and read merchant location proofs.

    Usage::

        registry = ProofRegistry(InMemoryRecordStore(), ProofConfig())
        proof = await registry.create_location_proof(37_774_900, -122_419_400, "m-1", server_id)
        await registry.close_location_proof("m-1", server_id)
    """

    def __init__(
        self,
        store: RecordStore,
        config: ProofConfig | None = None,
        *,
        emitter: EventEmitter | None = None,
        clock: Callable[[], int] = _host_clock,
    ) -> None:
        self._store = store
        self._config = config or ProofConfig()
        self._program_id = self._config.program_id_bytes()
        self._emitter = emitter
        self._clock = clock

    @property
    def config(self) -> ProofConfig:
        return self._config

    def derive_address(self, merchant_id: str) -> ProofAddress:
        return derive_proof_address(merchant_id, self._program_id)

    async def create_location_proof(self, lat: int, lng: int, merchant_id: str, caller: str) -> LocationProof:
        """Record a verified location for *merchant_id*.

        Raises
        ------
        MerchantIdTooLongError, InvalidLatitudeError, InvalidLongitudeError
            Input rejected; nothing was written.
        UnauthorizedError
            *caller* is not the configured server identity.
        ProofAlreadyExistsError
            A proof already exists; it is left untouched.
        """
        try:
            validate_merchant_id(merchant_id)
            validate_coordinates(lat, lng)
        except ProofOperationError as exc:
            exc.merchant_id = merchant_id
            raise

        server_identity = self._config.server_identity
        if server_identity is not None and caller != server_identity:
            raise UnauthorizedError(
                f"{caller} is not the designated server identity",
                merchant_id=merchant_id,
            )

        address = self.derive_address(merchant_id)
        timestamp = self._clock()
        proof = LocationProof(lat=lat, lng=lng, verified_at=timestamp, bump=address.bump)

        try:
            await self._store.create_if_absent(address.key_hex, StoredRecord(data=encode_proof(proof), owner=caller))
        except ProofOperationError as exc:
            exc.merchant_id = merchant_id
            raise

        _logger.info("Location proof created: lat=%s, lng=%s, timestamp=%s", lat, lng, timestamp)

        if self._emitter is not None and self._config.events_enabled:
            self._emitter.emit(LocationVerifiedEvent(lat=lat, lng=lng, timestamp=timestamp))
        return proof

    async def close_location_proof(self, merchant_id: str, caller: str) -> LocationProof | None:
        """Remove *merchant_id*'s proof; only its owner may do this.

        The slot can be created again afterwards. Returns the closed proof,
        or ``None`` when the store removed it without returning its contents.

        Raises
        ------
        ProofNotFoundError
            No proof exists for *merchant_id*.
        UnauthorizedError
            *caller* does not own the proof; it is left untouched.
        """
        address = self.derive_address(merchant_id)
        try:
            record = await self._store.delete(address.key_hex, caller, bump=address.bump)
        except ProofOperationError as exc:
            exc.merchant_id = merchant_id
            raise

        _logger.info("Location proof closed for merchant %s", merchant_id)
        if record is None:
            return None
        return record.proof()

    async def get_location_proof(self, merchant_id: str) -> LocationProof | None:
        address = self.derive_address(merchant_id)
        record = await self._store.read(address.key_hex)
        if record is None:
            return None
        return record.proof()

    async def proof_state(self, merchant_id: str) -> ProofState:
        """``VERIFIED`` when a proof is live, otherwise ``NONEXISTENT``.

        A closed slot is indistinguishable from one never created.
        """
        proof = await self.get_location_proof(merchant_id)
        return ProofState.VERIFIED if proof is not None else ProofState.NONEXISTENT
