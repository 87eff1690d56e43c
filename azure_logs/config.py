"""
Configuration for the Azure log adapter.

Settings come from three places, highest precedence first: explicit
overrides (command line), a YAML file, and the process environment.

Example YAML::

    regex_scrub: '\\d+\\.\\d+\\.\\d+\\.\\d+'
    workers: 4
    on_timestamp_error: skip
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from azure_logs.errors import ConfigurationError
from azure_logs.output.event_adapter import TIMESTAMP_ERROR_POLICIES, LogEventAdapter

ENV_REGEX_SCRUB = "LOG_REGEX_SCRUB"
ENV_WORKERS = "LOG_ADAPTER_WORKERS"
ENV_TIMESTAMP_ERROR_POLICY = "LOG_TIMESTAMP_ERROR_POLICY"


@dataclass(frozen=True)
class AdapterConfig:
    """Construction parameters for a LogEventAdapter."""

    regex_scrub: str | None = None
    workers: int = 1
    on_timestamp_error: str = "raise"

    def __post_init__(self) -> None:
        if self.regex_scrub is not None and not isinstance(self.regex_scrub, str):
            raise ConfigurationError("'regex_scrub' must be a string")
        # bool is an int subclass; reject it explicitly
        if isinstance(self.workers, bool) or not isinstance(self.workers, int):
            raise ConfigurationError("'workers' must be an integer")
        if self.workers < 1:
            raise ConfigurationError("'workers' must be at least 1")
        if self.on_timestamp_error not in TIMESTAMP_ERROR_POLICIES:
            raise ConfigurationError(
                f"'on_timestamp_error' must be one of {TIMESTAMP_ERROR_POLICIES}"
            )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], base: AdapterConfig | None = None
    ) -> AdapterConfig:
        """
        Build a config from a settings mapping.

        Keys present in ``data`` replace those of ``base`` (defaults when
        not given). Unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(map(str, set(data) - known))
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return replace(base if base is not None else cls(), **data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AdapterConfig:
        """
        Read settings from environment variables.

        An empty LOG_REGEX_SCRUB disables scrubbing.
        """
        if environ is None:
            environ = os.environ

        data: dict[str, Any] = {}

        regex_scrub = environ.get(ENV_REGEX_SCRUB)
        if regex_scrub:
            data["regex_scrub"] = regex_scrub

        workers = environ.get(ENV_WORKERS)
        if workers:
            try:
                data["workers"] = int(workers)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_WORKERS} must be an integer, got {workers!r}"
                ) from None

        policy = environ.get(ENV_TIMESTAMP_ERROR_POLICY)
        if policy:
            data["on_timestamp_error"] = policy

        return cls(**data)

    def merged(self, **overrides: Any) -> AdapterConfig:
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def build_adapter(self) -> LogEventAdapter:
        return LogEventAdapter(
            self.regex_scrub,
            workers=self.workers,
            on_timestamp_error=self.on_timestamp_error,
        )


def load_config(path: Path, base: AdapterConfig | None = None) -> AdapterConfig:
    """
    Load adapter settings from a YAML file.

    An empty file leaves ``base`` unchanged; otherwise see
    AdapterConfig.from_mapping.
    """
    if base is None:
        base = AdapterConfig()

    with Path(path).open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return base

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must be a YAML mapping (dict)")

    return AdapterConfig.from_mapping(data, base)
