# azure_logs/output/event_adapter.py
"""
Transforms one Azure JSON object into one or more log entries.

Two payload shapes are supported:

- a single log event,
- ``{"records": [...]}`` where each object in the array is a log event.
"""

from __future__ import annotations

import logging
from typing import Any

from azure_logs.engine.ordered_map import ordered_map
from azure_logs.errors import ConfigurationError, TimestampParseError
from azure_logs.output.base import Adapter
from azure_logs.output.event_message import LogEventMessage, serialize_event
from azure_logs.output.log_entry import LogEntry
from azure_logs.output.scrubber import Scrubber

logger = logging.getLogger(__name__)

TIMESTAMP_ERROR_POLICIES = ("raise", "skip")


class LogEventAdapter(Adapter):
    """Adapter for Azure diagnostic and activity log exports."""

    # JSON property holding an array of log events
    AZURE_RECORDS_PROPERTY = "records"
    # Property the backend uses to match entries to monitored resources
    LM_RESOURCE_PROPERTY = "system.azure.resourceid"

    def __init__(
        self,
        regex_scrub: str | None = None,
        *,
        workers: int = 1,
        on_timestamp_error: str = "raise",
    ) -> None:
        if workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {workers}")
        if on_timestamp_error not in TIMESTAMP_ERROR_POLICIES:
            raise ConfigurationError(
                f"on_timestamp_error must be one of {TIMESTAMP_ERROR_POLICIES}, "
                f"got {on_timestamp_error!r}"
            )

        self._scrubber = Scrubber.from_regex(regex_scrub)
        self._workers = workers
        self._on_timestamp_error = on_timestamp_error

    @property
    def scrubber(self) -> Scrubber:
        return self._scrubber

    @property
    def workers(self) -> int:
        return self._workers

    @property
    def on_timestamp_error(self) -> str:
        return self._on_timestamp_error

    def apply(self, log: dict[str, Any]) -> list[LogEntry]:
        if not isinstance(log, dict):
            raise TypeError(f"Expected a JSON object, got {type(log).__name__}")

        records = log.get(self.AZURE_RECORDS_PROPERTY)
        if isinstance(records, list):
            events = [record for record in records if isinstance(record, dict)]
            logger.debug(
                "Batch payload: %d of %d records are events",
                len(events),
                len(records),
            )
        else:
            events = [log]

        if self._on_timestamp_error == "skip":
            entries = ordered_map(self._create_entry_or_skip, events, self._workers)
            return [entry for entry in entries if entry is not None]

        return ordered_map(self.create_entry, events, self._workers)

    def create_entry(self, event: dict[str, Any]) -> LogEntry:
        """
        Transform a single Azure log event into a log entry.

        Raises TimestampParseError if the event's ``time`` is not an
        ISO-8601 instant.
        """
        decoded = LogEventMessage.decode(event)
        entry = LogEntry()

        entry.put_lm_resource_id_item(self.LM_RESOURCE_PROPERTY, decoded.resource_id)

        timestamp = decoded.epoch_seconds()
        if timestamp is not None:
            entry.timestamp = timestamp

        # properties.Msg if present, otherwise the whole event
        if decoded.msg is not None:
            message = decoded.msg
        else:
            message = serialize_event(event)

        entry.message = self._scrubber.scrub(message)
        return entry

    def _create_entry_or_skip(self, event: dict[str, Any]) -> LogEntry | None:
        try:
            return self.create_entry(event)
        except TimestampParseError as exc:
            logger.warning(
                "Skipping event from resource %r: %s",
                event.get("resourceId"),
                exc,
            )
            return None
