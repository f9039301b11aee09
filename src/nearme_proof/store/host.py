"""Record store backed by the host runtime over HTTP.

Every request is signed by the server keypair. The host verifies the
signature, serializes access per key and persists records; this adapter
only maps its responses onto the store contract.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

import aiohttp

from nearme_proof._constants import USER_AGENT
from nearme_proof._crypto.signing import ServerKeypair
from nearme_proof._redact import describe_request
from nearme_proof.config import ProofConfig
from nearme_proof.exceptions import (
    ProofAlreadyExistsError,
    ProofCodecError,
    ProofNotFoundError,
    ProofTransportError,
    UnauthorizedError,
)
from nearme_proof.store.base import StoredRecord

_logger = logging.getLogger(__name__)

_UNAUTHORIZED_STATUSES = frozenset({401, 403})


def _record_path(key: str) -> str:
    return f"/v1/records/{key}"


def _signing_message(method: str, path: str, body: str) -> bytes:
    return f"{method}\n{path}\n{body}".encode()


def _record_from_body(body: Any, endpoint: str) -> StoredRecord:
    if not isinstance(body, dict):
        raise ProofTransportError(f"Record body from {endpoint} is not an object", endpoint=endpoint)
    data = body.get("data")
    owner = body.get("owner")
    if not isinstance(data, str) or not isinstance(owner, str):
        raise ProofTransportError(f"Record body from {endpoint} is missing data/owner", endpoint=endpoint)
    try:
        raw = base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ProofTransportError(f"Record data from {endpoint} is not base64", endpoint=endpoint) from exc
    return StoredRecord(data=raw, owner=owner)


class HostRecordStore:
    """Production :class:`RecordStore` talking to the host runtime."""

    def __init__(
        self,
        config: ProofConfig,
        signer: ServerKeypair,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._signer = signer
        self._http = http_session

    async def _request(self, method: str, key: str, payload: dict[str, Any] | None = None) -> tuple[int, Any]:
        """Send a signed request and return ``(status, parsed_body)``.

        ``parsed_body`` is ``None`` for empty responses.
        """
        path = _record_path(key)
        body = json.dumps(payload, separators=(",", ":")) if payload is not None else ""
        headers: dict[str, str] = {
            "accept": "application/json",
            "content-type": "application/json; charset=UTF-8",
            "user-agent": USER_AGENT,
            "x-nearme-identity": self._signer.identity,
            "x-nearme-signature": self._signer.sign(_signing_message(method, path, body)).hex(),
        }
        url = f"{self._config.host_url.rstrip('/')}{path}"
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Host request: %s", describe_request(method, url, headers, payload))

        try:
            async with self._http.request(
                method,
                url,
                data=body or None,
                headers=headers,
                timeout=timeout,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise ProofTransportError(f"Request to {path} failed: {exc}", endpoint=path) from exc
        except TimeoutError as exc:
            raise ProofTransportError(f"Request to {path} timed out", endpoint=path) from exc

        _logger.debug("%s %s -> %s", method, url, status)

        if not text.strip():
            return status, None
        try:
            return status, json.loads(text)
        except json.JSONDecodeError as exc:
            if status >= 400:
                # Error pages are not always JSON; the status alone is enough.
                return status, None
            raise ProofTransportError(
                f"Invalid JSON from {path}: {text[:200]}",
                status_code=status,
                endpoint=path,
            ) from exc

    @staticmethod
    def _unexpected(status: int, path: str) -> ProofTransportError:
        return ProofTransportError(f"HTTP {status} from {path}", status_code=status, endpoint=path)

    async def create_if_absent(self, key: str, record: StoredRecord) -> None:
        payload = {"data": base64.b64encode(record.data).decode("ascii"), "owner": record.owner}
        status, _ = await self._request("PUT", key, payload)
        if status in (200, 201):
            return
        if status == 409:
            raise ProofAlreadyExistsError(f"record {key} already in use")
        if status in _UNAUTHORIZED_STATUSES:
            raise UnauthorizedError(f"host rejected create of record {key}")
        raise self._unexpected(status, _record_path(key))

    async def read(self, key: str) -> StoredRecord | None:
        status, body = await self._request("GET", key)
        if status == 404:
            return None
        if status != 200:
            raise self._unexpected(status, _record_path(key))
        return _record_from_body(body, _record_path(key))

    async def delete(self, key: str, requester: str, *, bump: int | None = None) -> StoredRecord | None:
        status, body = await self._request("DELETE", key, {"requester": requester, "bump": bump})
        if status == 404:
            raise ProofNotFoundError(f"record {key} does not exist")
        if status in _UNAUTHORIZED_STATUSES:
            raise UnauthorizedError(f"{requester} is not the owner of record {key}")
        if status != 200:
            raise self._unexpected(status, _record_path(key))
        # The host has already removed the record; a bad echo must not fail the close.
        try:
            record = _record_from_body(body, _record_path(key))
            record.proof()
        except (ProofTransportError, ProofCodecError):
            _logger.warning("Record %s deleted but the host returned an unusable body", key, exc_info=True)
            return None
        return record
