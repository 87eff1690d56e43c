"""
Execution helpers for the Azure log adapter.

- ordered_map: order-preserving (optionally threaded) map
- EntryBus: delivery of entry batches to caller-owned sinks
"""

from azure_logs.engine.entry_bus import EntryBus
from azure_logs.engine.ordered_map import ordered_map

__all__ = ["EntryBus", "ordered_map"]
