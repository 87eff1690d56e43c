"""
Hand-off point between the adapter and whatever ships entries out.

A sink receives whole batches: all entries produced from one delivery of
Event Hub messages, in the order the adapter produced them. Sinks own
transmission, retry and dead-lettering; the bus owns none of that.
"""

from collections.abc import Callable

from azure_logs.output.log_entry import LogEntry

Sink = Callable[[list[LogEntry]], None]


class EntryBus:
    """
    Delivers entry batches to sinks.

    Empty batches are dropped so sinks never see a no-op request. The
    same list object is passed to every sink; sinks must not mutate it.
    A failing sink stops delivery to the sinks registered after it.
    """

    def __init__(self) -> None:
        self._sinks: list[Sink] = []
        self._closed: bool = False
        self._delivered: int = 0

    @property
    def delivered(self) -> int:
        """Number of entries handed to sinks so far."""
        return self._delivered

    def subscribe(self, sink: Sink) -> None:
        if self._closed:
            raise RuntimeError("Cannot subscribe to a closed entry bus")
        self._sinks.append(sink)

    def publish(self, entries: list[LogEntry]) -> bool:
        """
        Send one batch to every sink. Returns False if the batch was empty.
        """
        if self._closed:
            raise RuntimeError("Cannot publish to a closed entry bus")
        if not entries:
            return False

        for sink in self._sinks:
            sink(entries)
        self._delivered += len(entries)
        return True

    def close(self) -> None:
        """Refuse further subscriptions and batches."""
        self._closed = True
