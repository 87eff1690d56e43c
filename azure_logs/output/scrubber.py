# azure_logs/output/scrubber.py
"""
Message scrubbing.

A scrubber is chosen once, when the adapter is built: either the identity
``NoScrubber`` or a ``PatternScrubber`` holding a compiled expression.
Both are immutable and safe to share between threads.
"""

from __future__ import annotations

import re

from azure_logs.errors import PatternError


class Scrubber:
    """Base scrubber. Returns the message unchanged."""

    def scrub(self, message: str) -> str:
        return message

    @staticmethod
    def from_regex(regex: str | None) -> Scrubber:
        """
        Build the scrubber for an optional regular expression.

        Raises PatternError straight away if the expression does not compile.
        """
        if regex is None:
            return NoScrubber()
        try:
            pattern = re.compile(regex)
        except re.error as exc:
            raise PatternError(regex, str(exc)) from exc
        return PatternScrubber(pattern)


class NoScrubber(Scrubber):
    """Scrubbing disabled."""

    def __repr__(self) -> str:
        return "NoScrubber()"


class PatternScrubber(Scrubber):
    """Removes every match of a compiled pattern."""

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self._pattern = pattern

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def scrub(self, message: str) -> str:
        # A single pass; empty matches are stepped over by re.sub.
        return self._pattern.sub("", message)

    def __repr__(self) -> str:
        return f"PatternScrubber({self._pattern.pattern!r})"
