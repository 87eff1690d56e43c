"""
Exception types raised by the Azure log adapter.

Shape variations in the incoming payload (missing ``records``, missing
message, missing resource id) are not errors. Only invalid configuration
and corrupt timestamps are surfaced to the caller.
"""


class AzureLogsError(Exception):
    """Base class for all adapter errors."""


class ConfigurationError(AzureLogsError, ValueError):
    """Adapter configuration is invalid."""


class PatternError(ConfigurationError):
    """The scrub regular expression does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid scrub pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class TimestampParseError(AzureLogsError, ValueError):
    """An event carries a ``time`` value that is not an ISO-8601 instant."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Cannot parse event time {value!r} as an ISO-8601 instant")
        self.value = value
