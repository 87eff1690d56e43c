# azure_logs/output/log_entry.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LogEntry:
    """A single log entry in the shape expected by the ingestion backend."""

    lm_resource_id: dict[str, str] = field(default_factory=dict)
    timestamp: int | None = None
    message: str | None = None

    def put_lm_resource_id_item(self, key: str, value: str) -> LogEntry:
        self.lm_resource_id[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the entry as the ingestion API payload. Unset timestamps are omitted."""
        payload: dict[str, Any] = {
            "message": self.message,
            "_lm.resourceId": dict(self.lm_resource_id),
        }
        if self.timestamp is not None:
            payload["timestamp"] = self.timestamp
        return payload
