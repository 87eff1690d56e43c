"""Test configuration and fixtures."""

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict[str, Any]:
    """Load a sample Azure payload from tests/fixtures."""
    with (FIXTURES_DIR / name).open("r", encoding="utf-8") as fh:
        return json.load(fh)


def first_event(payload: dict[str, Any]) -> dict[str, Any]:
    """Return the first log event of a payload, batch or not."""
    records = payload.get("records")
    if isinstance(records, list):
        return next(r for r in records if isinstance(r, dict))
    return payload


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def fixture_payload():
    """Loader for sample payloads by file name."""
    return load_fixture


@pytest.fixture
def single_event() -> dict[str, Any]:
    """A single event carrying properties.Msg."""
    return {
        "resourceId": "R1",
        "time": "2020-01-01T00:00:00Z",
        "properties": {"Msg": "hello"},
    }


@pytest.fixture
def batch_payload() -> dict[str, Any]:
    """Two activity-style events without a Msg field."""
    return {
        "records": [
            {"resourceId": "R1", "time": "2020-01-01T00:00:00Z", "properties": {}},
            {"resourceId": "R2", "time": "2020-01-01T00:00:01Z", "properties": {}},
        ]
    }


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove adapter settings from the environment."""
    for name in ("LOG_REGEX_SCRUB", "LOG_ADAPTER_WORKERS", "LOG_TIMESTAMP_ERROR_POLICY"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def fixture_first_event():
    """Loader returning the first log event of a sample payload."""
    return lambda name: first_event(load_fixture(name))
