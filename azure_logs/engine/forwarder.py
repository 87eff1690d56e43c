"""
Forwarder from raw Event Hub messages to the entry bus.

Each message is expected to be a JSON document holding one Azure log
payload. Messages that are not JSON objects are logged and skipped so one
corrupt message does not lose the rest of the delivery.
"""

import json
import logging
from collections.abc import Iterable

from azure_logs.engine.entry_bus import EntryBus
from azure_logs.output.base import Adapter
from azure_logs.output.log_entry import LogEntry

logger = logging.getLogger(__name__)


class EventForwarder:
    """
    Parses messages, runs them through an adapter and publishes the result.
    """

    def __init__(self, adapter: Adapter, bus: EntryBus | None = None) -> None:
        self.adapter = adapter
        self.bus = bus

    def parse(self, message: str | bytes) -> dict | None:
        """
        Parse one message. Returns None when it is not a JSON object.
        """
        try:
            payload = json.loads(message)
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping message that is not valid JSON: %s", exc)
            return None

        if not isinstance(payload, dict):
            logger.warning(
                "Skipping message holding a JSON %s instead of an object",
                type(payload).__name__,
            )
            return None

        return payload

    def forward(self, messages: Iterable[str | bytes]) -> list[LogEntry]:
        """
        Transform all messages and publish the entries as one batch.
        """
        entries: list[LogEntry] = []
        for message in messages:
            payload = self.parse(message)
            if payload is not None:
                entries.extend(self.adapter.apply(payload))

        logger.debug("Forwarding %d entries", len(entries))
        if self.bus is not None:
            self.bus.publish(entries)

        return entries
