"""Unit tests for azure_logs/output/scrubber.py"""
import re

import pytest

from azure_logs.errors import PatternError
from azure_logs.output.scrubber import NoScrubber, PatternScrubber, Scrubber


def test_from_regex_none_is_no_scrubber():
    scrubber = Scrubber.from_regex(None)
    assert isinstance(scrubber, NoScrubber)
    assert scrubber.scrub("keep 42") == "keep 42"


def test_empty_regex_is_a_pattern():
    # An empty expression is a valid pattern that matches everywhere
    scrubber = Scrubber.from_regex("")
    assert isinstance(scrubber, PatternScrubber)
    assert scrubber.scrub("abc") == "abc"


def test_digits_are_removed_globally():
    scrubber = Scrubber.from_regex(r"\d")
    assert scrubber.scrub("error 42 at node 7") == "error  at node "


@pytest.mark.parametrize(
    "regex, message, expected",
    [
        (r"\d+\.\d+\.\d+\.\d+", "client 10.0.0.4 via 203.0.113.9", "client  via "),
        (r"[\w.-]+@[\w.-]+", "owner jane.doe@example.com", "owner "),
        (r"''|\"", 'say "hi" \'\'', "say hi "),
        (r".", "anything", ""),
        (r"a*", "baaac", "bc"),
    ],
)
def test_scrub_examples(regex, message, expected):
    assert Scrubber.from_regex(regex).scrub(message) == expected


def test_invalid_regex_raises_pattern_error():
    with pytest.raises(PatternError) as exc_info:
        Scrubber.from_regex("(")
    assert exc_info.value.pattern == "("
    assert isinstance(exc_info.value.__cause__, re.error)


def test_pattern_property_and_repr():
    scrubber = Scrubber.from_regex(r"\s+")
    assert scrubber.pattern.pattern == r"\s+"
    assert repr(scrubber) == "PatternScrubber('\\\\s+')"
    assert repr(NoScrubber()) == "NoScrubber()"


def test_base_scrubber_is_identity():
    assert Scrubber().scrub("unchanged") == "unchanged"
