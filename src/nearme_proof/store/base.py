"""Record store port.

The store owns every durable proof. Implementations must make
``create_if_absent`` atomic per key: concurrent creates for one key
serialize and exactly one wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from nearme_proof._layout import decode_proof
from nearme_proof.models.proof import LocationProof


@dataclass(frozen=True, slots=True)
class StoredRecord:
    """Encoded proof bytes plus the identity allowed to close it."""

    data: bytes
    owner: str

    def proof(self) -> LocationProof:
        return decode_proof(self.data)


class RecordStore(Protocol):
    """Structural store interface used by :class:`ProofRegistry`.

    Keys are lowercase hex derived addresses.
    """

    async def create_if_absent(self, key: str, record: StoredRecord) -> None:
        """Write *record* under *key*.

        Raises :class:`ProofAlreadyExistsError` if *key* is live; the
        existing record is left untouched.
        """
        ...

    async def read(self, key: str) -> StoredRecord | None:
        ...

    async def delete(self, key: str, requester: str, *, bump: int | None = None) -> StoredRecord | None:
        """Remove and return the record under *key*.

        Returns ``None`` when the record was removed but its contents could
        not be recovered; the delete itself still happened.

        Raises :class:`ProofNotFoundError` when *key* is not live and
        :class:`UnauthorizedError` when *requester* is not the owner or
        *bump* differs from the stored bump.
        """
        ...
