"""MQTT event sink."""

from __future__ import annotations

import logging
from typing import Any, cast

import paho.mqtt.client as mqtt

from nearme_proof.config import ProofConfig
from nearme_proof.exceptions import ProofConfigError, ProofEventError
from nearme_proof.models.events import LocationVerifiedEvent


class MqttEventSink:
    """Publish each event as JSON to one topic.

    Uses paho's threaded network loop; :meth:`publish` only queues the
    message and never blocks on the broker.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int = 1883,
        topic: str,
        client_id: str = "",
        keepalive: int = 60,
        logger: logging.Logger | None = None,
        client: mqtt.Client | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._topic = topic
        self._client_id = client_id
        self._keepalive = keepalive
        self._logger = logger or logging.getLogger(__name__)
        self._client = client
        self._running = False

    @classmethod
    def from_config(cls, config: ProofConfig, **kwargs: Any) -> MqttEventSink:
        if not config.mqtt_host:
            raise ProofConfigError("mqtt_host is not configured")
        return cls(host=config.mqtt_host, port=config.mqtt_port, topic=config.mqtt_topic, **kwargs)

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Connect to the broker and start the network loop."""
        if self._running:
            return
        client = self._client
        if client is None:
            client = mqtt.Client(
                callback_api_version=cast(Any, mqtt).CallbackAPIVersion.VERSION2,
                client_id=self._client_id,
                protocol=mqtt.MQTTv5,
            )
            client.enable_logger(self._logger)
            self._client = client

        self._logger.debug("MQTT sink connecting host=%s port=%s topic=%s", self._host, self._port, self._topic)
        client.connect(self._host, self._port, keepalive=self._keepalive)
        client.loop_start()
        self._running = True

    def stop(self) -> None:
        client = self._client
        was_running = self._running
        self._running = False
        if client is None:
            return
        try:
            if was_running:
                client.disconnect()
        finally:
            client.loop_stop()
            self._logger.debug("MQTT sink stopped")

    def publish(self, event: LocationVerifiedEvent) -> None:
        if self._client is None or not self._running:
            raise ProofEventError("MQTT sink is not started")
        info = self._client.publish(self._topic, event.model_dump_json(), qos=0)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise ProofEventError(f"MQTT publish failed rc={info.rc}")
