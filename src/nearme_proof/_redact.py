"""Scrub signed host requests before they reach DEBUG logs.

Every host request carries an Ed25519 signature header and a base64 record
blob. The signature is replaced outright; the blob is summarized by size
so log lines stay short.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REDACTED = "<redacted>"

_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "x-nearme-signature",
        "signature",
        "server_secret_key",
        "secret_key",
        "authorization",
    }
)

# Encoded record bytes; the length is the only useful part in a log line.
_BLOB_KEYS: frozenset[str] = frozenset({"data"})


def _scrub_value(key: str, value: Any) -> Any:
    lowered = key.lower()
    if lowered in _SECRET_KEYS:
        return REDACTED
    if lowered in _BLOB_KEYS and isinstance(value, str):
        return f"<base64:{len(value)} chars>"
    if isinstance(value, Mapping):
        return scrub_mapping(value)
    return value


def scrub_mapping(values: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Return a copy of *values* with signatures and record blobs hidden."""
    if values is None:
        return None
    return {str(k): _scrub_value(str(k), v) for k, v in values.items()}


def describe_request(method: str, url: str, headers: Mapping[str, str], payload: Mapping[str, Any] | None) -> str:
    """One-line summary of a signed host request for DEBUG logs."""
    return f"{method} {url} headers={scrub_mapping(headers)} payload={scrub_mapping(payload)}"
