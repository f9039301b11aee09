"""Server keypair for signing host requests.

The keypair file format is a JSON list of 64 integers: the 32-byte Ed25519
seed followed by the 32-byte public key.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from nearme_proof.config import ProofConfig
from nearme_proof.exceptions import ProofConfigError

_SEED_LEN = 32
_KEYPAIR_LEN = 64


def _parse_secret(text: str, source: str) -> bytes:
    try:
        values = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProofConfigError(f"{source} is not valid JSON") from exc
    if not isinstance(values, list) or not all(isinstance(v, int) and 0 <= v <= 255 for v in values):
        raise ProofConfigError(f"{source} must be a JSON list of byte values")
    return bytes(values)


class ServerKeypair:
    """Ed25519 signer whose public key is the server's caller identity."""

    def __init__(self, private_key: Ed25519PrivateKey) -> None:
        self._private_key = private_key
        self._public_bytes = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    @classmethod
    def generate(cls) -> ServerKeypair:
        return cls(Ed25519PrivateKey.generate())

    @classmethod
    def from_secret(cls, secret: bytes) -> ServerKeypair:
        """Build from a 32-byte seed or a 64-byte ``seed || public`` keypair."""
        if len(secret) not in (_SEED_LEN, _KEYPAIR_LEN):
            raise ProofConfigError(f"secret key must be {_SEED_LEN} or {_KEYPAIR_LEN} bytes, got {len(secret)}")
        keypair = cls(Ed25519PrivateKey.from_private_bytes(secret[:_SEED_LEN]))
        if len(secret) == _KEYPAIR_LEN and secret[_SEED_LEN:] != keypair.public_key:
            raise ProofConfigError("public half of keypair does not match its seed")
        return keypair

    @classmethod
    def load(cls, config: ProofConfig) -> ServerKeypair:
        """Load the server keypair.

        Lookup order: ``config.server_secret_key``, the
        ``NEARME_SERVER_SECRET_KEY`` environment variable, then the file at
        ``config.keypair_path``.
        """
        inline = config.server_secret_key or os.environ.get("NEARME_SERVER_SECRET_KEY")
        if inline:
            return cls.from_secret(_parse_secret(inline, "server secret key"))

        path = Path(config.keypair_path).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ProofConfigError(
                f"Server keypair not found. Set NEARME_SERVER_SECRET_KEY or create {path}"
            ) from exc
        return cls.from_secret(_parse_secret(text, str(path)))

    @property
    def public_key(self) -> bytes:
        return self._public_bytes

    @property
    def identity(self) -> str:
        """Hex public key used as the caller identity."""
        return self._public_bytes.hex()

    def sign(self, message: bytes) -> bytes:
        return self._private_key.sign(message)
