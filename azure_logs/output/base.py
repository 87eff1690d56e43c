# azure_logs/output/base.py
from __future__ import annotations

from typing import Any

from azure_logs.output.log_entry import LogEntry


class Adapter:
    """Base adapter for transforming one ingested JSON object into log entries."""

    def apply(self, log: dict[str, Any]) -> list[LogEntry]:
        """Override in subclasses."""
        return []

    def __call__(self, log: dict[str, Any]) -> list[LogEntry]:
        return self.apply(log)
