from __future__ import annotations

import pytest

from nearme_proof._constants import DEFAULT_PROGRAM_ID
from nearme_proof.config import ProofConfig
from nearme_proof.exceptions import ProofConfigError


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "NEARME_PROGRAM_ID",
        "NEARME_SERVER_IDENTITY",
        "NEARME_HOST_URL",
        "NEARME_KEYPAIR_PATH",
        "NEARME_SERVER_SECRET_KEY",
        "NEARME_MQTT_HOST",
        "NEARME_MQTT_PORT",
        "NEARME_MQTT_TOPIC",
        "NEARME_REQUEST_TIMEOUT",
        "NEARME_EVENTS_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    config = ProofConfig.from_env()
    assert config.program_id_bytes() == DEFAULT_PROGRAM_ID
    assert config.server_identity is None
    assert config.events_enabled is True
    assert config.keypair_path.endswith("id.json")


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("NEARME_PROGRAM_ID", "11" * 32)
    monkeypatch.setenv("NEARME_SERVER_IDENTITY", "ab" * 32)
    monkeypatch.setenv("NEARME_HOST_URL", "https://host.example")
    monkeypatch.setenv("NEARME_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("NEARME_MQTT_HOST", "broker.example")
    monkeypatch.setenv("NEARME_MQTT_PORT", "8883")
    monkeypatch.setenv("NEARME_EVENTS_ENABLED", "off")

    config = ProofConfig.from_env()

    assert config.program_id_bytes() == b"\x11" * 32
    assert config.server_identity == "ab" * 32
    assert config.host_url == "https://host.example"
    assert config.request_timeout == 2.5
    assert config.mqtt_host == "broker.example"
    assert config.mqtt_port == 8883
    assert config.events_enabled is False


def test_overrides_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("NEARME_HOST_URL", "https://env.example")
    monkeypatch.setenv("NEARME_REQUEST_TIMEOUT", "not-a-number")

    config = ProofConfig.from_env(host_url="https://override.example", request_timeout=1.0)

    assert config.host_url == "https://override.example"
    assert config.request_timeout == 1.0


def test_bad_numeric_env_raises_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("NEARME_MQTT_PORT", "eighty")
    with pytest.raises(ProofConfigError):
        ProofConfig.from_env()


@pytest.mark.parametrize("program_id", ["zz" * 32, "11" * 31, ""])
def test_invalid_program_id(program_id: str) -> None:
    with pytest.raises(ProofConfigError):
        ProofConfig(program_id=program_id).program_id_bytes()


def test_secret_key_not_in_repr() -> None:
    assert "[1, 2" not in repr(ProofConfig(server_secret_key="[1, 2, 3]"))
