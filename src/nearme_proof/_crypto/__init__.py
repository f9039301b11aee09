"""Address derivation and request signing."""

from __future__ import annotations

from nearme_proof._crypto.derivation import (
    create_program_address,
    derive_proof_address,
    find_program_address,
    is_on_curve,
)
from nearme_proof._crypto.signing import ServerKeypair

__all__ = [
    "ServerKeypair",
    "create_program_address",
    "derive_proof_address",
    "find_program_address",
    "is_on_curve",
]
