"""In-memory record store for tests and single-process use."""

from __future__ import annotations

import logging
import threading

from nearme_proof.exceptions import ProofAlreadyExistsError, ProofNotFoundError, UnauthorizedError
from nearme_proof.store.base import StoredRecord

_logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Dict-backed store with a lock around every check-and-mutate.

    No ``await`` happens while the lock is held, so the store is safe to
    share between asyncio tasks and threads alike.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, StoredRecord] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._records)

    async def create_if_absent(self, key: str, record: StoredRecord) -> None:
        with self._lock:
            if key in self._records:
                raise ProofAlreadyExistsError(f"record {key} already in use")
            self._records[key] = record
        _logger.debug("Stored record key=%s owner=%s", key, record.owner)

    async def read(self, key: str) -> StoredRecord | None:
        with self._lock:
            return self._records.get(key)

    async def delete(self, key: str, requester: str, *, bump: int | None = None) -> StoredRecord:
        with self._lock:
            record = self._records.get(key)
            if record is None:
                raise ProofNotFoundError(f"record {key} does not exist")
            if record.owner != requester:
                raise UnauthorizedError(f"{requester} is not the owner of record {key}")
            if bump is not None and record.proof().bump != bump:
                raise UnauthorizedError(f"bump {bump} does not match record {key}")
            del self._records[key]
        _logger.debug("Deleted record key=%s", key)
        return record
