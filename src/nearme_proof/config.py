"""Registry configuration for nearme_proof."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from nearme_proof._constants import ADDRESS_LEN, DEFAULT_HOST_URL, DEFAULT_PROGRAM_ID
from nearme_proof.exceptions import ProofConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _default_keypair_path() -> str:
    return str(Path.home() / ".config" / "solana" / "id.json")


@dataclasses.dataclass(frozen=True)
class ProofConfig:
    """Registry configuration.

    Parameters
    ----------
    program_id : str
        Hex-encoded 32-byte program id mixed into every derived address.
        Two registries with different program ids never share keys.
    server_identity : str or None
        Hex public key of the designated server. When set, creates from any
        other caller are rejected in-process. When ``None`` the host's
        signer check is trusted.
    host_url : str
        Base URL of the host runtime used by :class:`HostRecordStore`.
    request_timeout : float
        Seconds before a host request is abandoned.
    keypair_path : str
        JSON keypair file (list of 64 ints) for the server signer.
    server_secret_key : str or None
        Inline JSON keypair; takes precedence over ``keypair_path``.
    events_enabled : bool
        Emit :class:`LocationVerifiedEvent` after successful creates.
    mqtt_host : str or None
        Broker for the MQTT event sink. ``None`` disables the sink.
    mqtt_port : int
        Broker port.
    mqtt_topic : str
        Topic the MQTT sink publishes to.
    """

    program_id: str = DEFAULT_PROGRAM_ID.hex()
    server_identity: str | None = None
    host_url: str = DEFAULT_HOST_URL
    request_timeout: float = 10.0
    keypair_path: str = dataclasses.field(default_factory=_default_keypair_path)
    server_secret_key: str | None = dataclasses.field(default=None, repr=False)
    events_enabled: bool = True
    mqtt_host: str | None = None
    mqtt_port: int = 1883
    mqtt_topic: str = "nearme/proofs/verified"

    def program_id_bytes(self) -> bytes:
        """Decode and validate :attr:`program_id`."""
        try:
            value = bytes.fromhex(self.program_id)
        except ValueError as exc:
            raise ProofConfigError(f"program_id is not valid hex: {self.program_id!r}") from exc
        if len(value) != ADDRESS_LEN:
            raise ProofConfigError(f"program_id must be {ADDRESS_LEN} bytes, got {len(value)}")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> ProofConfig:
        """Create configuration from ``NEARME_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "NEARME_PROGRAM_ID": "program_id",
            "NEARME_SERVER_IDENTITY": "server_identity",
            "NEARME_HOST_URL": "host_url",
            "NEARME_KEYPAIR_PATH": "keypair_path",
            "NEARME_SERVER_SECRET_KEY": "server_secret_key",
            "NEARME_MQTT_HOST": "mqtt_host",
            "NEARME_MQTT_TOPIC": "mqtt_topic",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("NEARME_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise ProofConfigError(f"NEARME_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        port_env = env.get("NEARME_MQTT_PORT")
        if port_env is not None and "mqtt_port" not in overrides:
            try:
                config_kwargs["mqtt_port"] = int(port_env)
            except ValueError as exc:
                raise ProofConfigError(f"NEARME_MQTT_PORT is not an integer: {port_env!r}") from exc

        if "events_enabled" not in overrides:
            config_kwargs["events_enabled"] = _env_bool(env.get("NEARME_EVENTS_ENABLED"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
