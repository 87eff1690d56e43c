# azure_logs/output/event_message.py
"""
Decoding of raw Azure log events.

Only three fields of an event are consumed: ``resourceId``, ``time`` and
``properties.Msg``. Everything else is tolerated and ignored here; the
raw object is kept by the caller for the fallback message.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from azure_logs.errors import TimestampParseError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Extended-format instant: seconds and fraction optional, offset required.
_INSTANT = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2})"
    r"(?::([0-9]{2})(\.[0-9]+)?)?"
    r"(Z|[+-][0-9]{2}:[0-9]{2})"
)

# Characters written as \uXXXX escapes in serialized events. They only ever
# occur inside JSON string literals, so replacing them keeps the JSON valid.
_HTML_ESCAPES = str.maketrans(
    {ch: f"\\u{ord(ch):04x}" for ch in "<>&='\u2028\u2029"}
)


def _as_text(value: Any) -> str | None:
    """Return a string slot value, coercing JSON scalars to their text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return None


def parse_instant(value: str) -> int:
    """
    Parse an ISO-8601 instant and return epoch seconds.

    Only the extended format is accepted (``YYYY-MM-DDTHH:MM[:SS[.f]]``)
    and the value must carry a UTC designator or an explicit offset.
    A leap second (``:60``) is read as ``:59``. Sub-second precision is
    truncated towards the past.
    """
    if not isinstance(value, str):
        raise TimestampParseError(value)

    match = _INSTANT.fullmatch(value)
    if match is None:
        raise TimestampParseError(value)

    head, seconds, fraction, offset = match.groups()
    if seconds == "60":
        seconds = "59"
    # datetime only keeps microseconds; Azure emits up to 7 digits.
    fraction = (fraction or "")[:7]

    try:
        parsed = datetime.fromisoformat(f"{head}:{seconds or '00'}{fraction}{offset}")
    except ValueError as exc:
        raise TimestampParseError(value) from exc

    return (parsed - EPOCH) // timedelta(seconds=1)


@dataclass(frozen=True)
class LogEventMessage:
    """The subset of an Azure log event used to build an entry."""

    resource_id: str = ""
    time: str | None = None
    msg: str | None = None

    @classmethod
    def decode(cls, event: dict[str, Any]) -> LogEventMessage:
        resource_id = _as_text(event.get("resourceId"))

        time = event.get("time")
        if time is not None and not isinstance(time, str):
            # Left for parse_instant to reject.
            time = _as_text(time) or repr(time)

        msg = None
        properties = event.get("properties")
        if isinstance(properties, dict):
            msg = _as_text(properties.get("Msg"))

        return cls(resource_id=resource_id or "", time=time, msg=msg)

    def epoch_seconds(self) -> int | None:
        if self.time is None:
            return None
        return parse_instant(self.time)


def serialize_event(event: dict[str, Any]) -> str:
    """
    Serialize a raw event as compact JSON for use as a message body.

    Non-ASCII text is kept as is; HTML-sensitive characters are escaped
    the way Gson does by default.
    """
    text = json.dumps(event, separators=(",", ":"), ensure_ascii=False)
    return text.translate(_HTML_ESCAPES)
