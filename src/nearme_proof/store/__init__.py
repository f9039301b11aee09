"""Record store port and its implementations.

The store is the only place durable proofs live. The registry never
caches a record beyond a single call.
"""

from nearme_proof.store.base import RecordStore, StoredRecord
from nearme_proof.store.host import HostRecordStore
from nearme_proof.store.memory import InMemoryRecordStore

__all__ = [
    "HostRecordStore",
    "InMemoryRecordStore",
    "RecordStore",
    "StoredRecord",
]
