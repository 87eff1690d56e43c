"""
Azure diagnostic log adapter.

Turns Azure log exports (single events or ``records`` batches) into log
entries for the monitoring backend. The package provides:
- LogEventAdapter: the JSON-to-entries transformation
- LogEntry: the produced entry type
- EventForwarder and EntryBus: delivery of entries to caller-owned sinks
- AdapterConfig: YAML and environment configuration
"""

from azure_logs.config import AdapterConfig, load_config
from azure_logs.engine.entry_bus import EntryBus
from azure_logs.engine.forwarder import EventForwarder
from azure_logs.errors import (
    AzureLogsError,
    ConfigurationError,
    PatternError,
    TimestampParseError,
)
from azure_logs.output.event_adapter import LogEventAdapter
from azure_logs.output.log_entry import LogEntry

__all__ = [
    "AdapterConfig",
    "load_config",
    "EntryBus",
    "EventForwarder",
    "AzureLogsError",
    "ConfigurationError",
    "PatternError",
    "TimestampParseError",
    "LogEventAdapter",
    "LogEntry",
]
