from __future__ import annotations

import json
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from nearme_proof._crypto.signing import ServerKeypair
from nearme_proof.config import ProofConfig
from nearme_proof.exceptions import ProofConfigError

_SEED = bytes(range(32))


def _keypair_bytes() -> bytes:
    return _SEED + ServerKeypair.from_secret(_SEED).public_key


def test_seed_and_keypair_forms_agree() -> None:
    from_seed = ServerKeypair.from_secret(_SEED)
    from_pair = ServerKeypair.from_secret(_keypair_bytes())
    assert from_seed.identity == from_pair.identity
    assert len(from_seed.identity) == 64


def test_mismatched_public_half_rejected() -> None:
    with pytest.raises(ProofConfigError):
        ServerKeypair.from_secret(_SEED + b"\x00" * 32)


def test_wrong_length_rejected() -> None:
    with pytest.raises(ProofConfigError):
        ServerKeypair.from_secret(b"\x01" * 16)


def test_signature_verifies_with_identity() -> None:
    signer = ServerKeypair.generate()
    signature = signer.sign(b"PUT\n/v1/records/ab\n{}")
    Ed25519PublicKey.from_public_bytes(bytes.fromhex(signer.identity)).verify(signature, b"PUT\n/v1/records/ab\n{}")


def test_load_from_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NEARME_SERVER_SECRET_KEY", raising=False)
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(_keypair_bytes())), encoding="utf-8")

    signer = ServerKeypair.load(ProofConfig(keypair_path=str(path)))

    assert signer.public_key == _keypair_bytes()[32:]


def test_inline_secret_preferred_over_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NEARME_SERVER_SECRET_KEY", raising=False)
    config = ProofConfig(
        keypair_path=str(tmp_path / "missing.json"),
        server_secret_key=json.dumps(list(_keypair_bytes())),
    )
    signer = ServerKeypair.load(config)
    assert signer.identity == ServerKeypair.from_secret(_SEED).identity


def test_env_secret(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEARME_SERVER_SECRET_KEY", json.dumps(list(_SEED)))
    signer = ServerKeypair.load(ProofConfig(keypair_path=str(tmp_path / "missing.json")))
    assert signer.identity == ServerKeypair.from_secret(_SEED).identity


def test_missing_keypair_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NEARME_SERVER_SECRET_KEY", raising=False)
    with pytest.raises(ProofConfigError, match="Server keypair not found"):
        ServerKeypair.load(ProofConfig(keypair_path=str(tmp_path / "missing.json")))


@pytest.mark.parametrize("content", ["not json", '{"a": 1}', "[1, 2, 300]"])
def test_malformed_keypair_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, content: str) -> None:
    monkeypatch.delenv("NEARME_SERVER_SECRET_KEY", raising=False)
    path = tmp_path / "id.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ProofConfigError):
        ServerKeypair.load(ProofConfig(keypair_path=str(path)))
