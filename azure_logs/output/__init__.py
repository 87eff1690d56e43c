# azure_logs/output/__init__.py
from .base import Adapter
from .event_adapter import LogEventAdapter
from .event_message import LogEventMessage, parse_instant, serialize_event
from .log_entry import LogEntry
from .scrubber import NoScrubber, PatternScrubber, Scrubber

__all__ = [
    "Adapter",
    "LogEventAdapter",
    "LogEventMessage",
    "parse_instant",
    "serialize_event",
    "LogEntry",
    "Scrubber",
    "NoScrubber",
    "PatternScrubber",
]
