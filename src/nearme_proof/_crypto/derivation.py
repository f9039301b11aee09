"""Deterministic proof addresses.

A proof address is a 32-byte SHA-256 digest of the seeds, a one-byte bump,
the program id and a fixed marker. Candidates that decode to a valid Ed25519
point are skipped, so no private key can ever sign for a derived address.
The first off-curve candidate, searching the bump downward from 255, is the
canonical address.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

from nearme_proof._constants import MAX_SEED_LEN, MAX_SEEDS, PDA_MARKER, PROOF_SEED
from nearme_proof.exceptions import ProofDerivationError
from nearme_proof.models.proof import ProofAddress
from nearme_proof.validation import validate_merchant_id

# Curve25519 field and the twisted Edwards ``d`` constant.
_P = 2**255 - 19
_D = (-121665 * pow(121666, -1, _P)) % _P


def is_on_curve(candidate: bytes) -> bool:
    """Return ``True`` when *candidate* decompresses to an Ed25519 point.

    The high bit of the last byte is the sign of ``x`` and does not affect
    validity. A point exists iff ``x² = (y² - 1) / (d·y² + 1)`` has a root.
    """
    y = (int.from_bytes(candidate, "little") & ((1 << 255) - 1)) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x2 = u * pow(v, -1, _P) % _P
    if x2 == 0:
        return True
    return pow(x2, (_P - 1) // 2, _P) == 1


def _check_seeds(seeds: Sequence[bytes]) -> None:
    if len(seeds) + 1 > MAX_SEEDS:
        raise ProofDerivationError(f"too many seeds: {len(seeds)}")
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise ProofDerivationError(f"seed exceeds {MAX_SEED_LEN} bytes")


def _hash_candidate(seeds: Sequence[bytes], bump: int, program_id: bytes) -> bytes:
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    hasher.update(bytes([bump]))
    hasher.update(program_id)
    hasher.update(PDA_MARKER)
    return hasher.digest()


def create_program_address(seeds: Sequence[bytes], bump: int, program_id: bytes) -> bytes:
    """Hash *seeds* + *bump* into an address for *program_id*.

    Raises :class:`ProofDerivationError` if a seed is too long or the
    resulting digest lies on the curve.
    """
    _check_seeds(seeds)
    if not 0 <= bump <= 255:
        raise ProofDerivationError(f"bump must fit in one byte, got {bump}")

    digest = _hash_candidate(seeds, bump, program_id)
    if is_on_curve(digest):
        raise ProofDerivationError("derived address lies on the ed25519 curve")
    return digest


def find_program_address(seeds: Sequence[bytes], program_id: bytes) -> tuple[bytes, int]:
    """Search bumps 255..1 and return the first valid ``(address, bump)``."""
    _check_seeds(seeds)
    for bump in range(255, 0, -1):
        digest = _hash_candidate(seeds, bump, program_id)
        if not is_on_curve(digest):
            return digest, bump
    raise ProofDerivationError("no off-curve address found for seeds")


def proof_seeds(merchant_id: str) -> list[bytes]:
    """Seeds for a merchant's proof address: ``[b"proof", merchant_id]``."""
    validate_merchant_id(merchant_id)
    return [PROOF_SEED, merchant_id.encode("utf-8")]


def derive_proof_address(merchant_id: str, program_id: bytes) -> ProofAddress:
    """Derive the storage address of *merchant_id*'s location proof.

    The length check runs first so no digest is ever computed from an
    oversized identifier.
    """
    seeds = proof_seeds(merchant_id)
    key, bump = find_program_address(seeds, program_id)
    return ProofAddress(key=key, bump=bump, merchant_id=merchant_id)
