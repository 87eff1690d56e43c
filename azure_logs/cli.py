# azure_logs/cli.py

from __future__ import annotations
import argparse
import json
import logging
import signal
import sys
from pathlib import Path
from typing import Any, List

from azure_logs.config import AdapterConfig, load_config
from azure_logs.engine.entry_bus import EntryBus
from azure_logs.engine.forwarder import EventForwarder
from azure_logs.errors import ConfigurationError
from azure_logs.output.event_adapter import TIMESTAMP_ERROR_POLICIES
from azure_logs.output.log_entry import LogEntry


def read_messages(path: Path) -> list[str]:
    """
    Read Event Hub style messages from a file, or stdin for ``-``.

    A file holding a single JSON document is one message; anything else is
    treated as JSON lines, one message per non-blank line.
    """
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        text = path.read_text(encoding="utf-8")

    try:
        json.loads(text)
    except ValueError:
        return [line for line in text.splitlines() if line.strip()]
    return [text]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="azure_logs.cli",
        description="Transform Azure diagnostic log exports into log entries",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="JSON or JSON-lines files with Azure log payloads ('-' for stdin)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with adapter settings",
    )
    parser.add_argument(
        "--scrub",
        default=None,
        help="Regular expression whose matches are removed from every message",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used to transform the events of a batch (default: 1)",
    )
    parser.add_argument(
        "--on-timestamp-error",
        choices=TIMESTAMP_ERROR_POLICIES,
        default=None,
        help="Abort on a malformed event time, or skip that event (default: raise)",
    )
    parser.add_argument(
        "--output",
        choices=["cli", "json"],
        default="cli",
        help="Output mode: 'cli' prints one entry per line; 'json' dumps all entries to a JSON file",
    )
    parser.add_argument(
        "--json-file",
        type=Path,
        default=Path("entries.json"),
        help="Path to JSON output file if --output=json",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    for path in args.inputs:
        if str(path) != "-" and not path.exists():
            print(f"Input file not found: {path}", file=sys.stderr)
            return 1

    # Build adapter: command line > config file > environment
    try:
        config = AdapterConfig.from_env()
        if args.config is not None:
            config = load_config(args.config, base=config)
        config = config.merged(
            regex_scrub=args.scrub,
            workers=args.workers,
            on_timestamp_error=args.on_timestamp_error,
        )
        adapter = config.build_adapter()
    except (ConfigurationError, OSError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    collected: List[dict[str, Any]] = []

    def handle_entries(entries: list[LogEntry]) -> None:
        for entry in entries:
            record = entry.to_dict()
            collected.append(record)
            if args.output == "cli":
                print(json.dumps(record, ensure_ascii=False))

    bus = EntryBus()
    bus.subscribe(handle_entries)
    forwarder = EventForwarder(adapter, bus)

    try:
        for path in args.inputs:
            forwarder.forward(read_messages(path))
    except Exception as exc:
        print(f"Transformation failed: {exc}", file=sys.stderr)
        return 3
    finally:
        bus.close()

    if args.output == "json":
        try:
            args.json_file.parent.mkdir(parents=True, exist_ok=True)
            with args.json_file.open("w", encoding="utf-8") as f:
                json.dump(collected, f, indent=2, ensure_ascii=False)
            print(f"{len(collected)} entries dumped to {args.json_file}")
        except OSError as exc:
            print(f"Failed to write JSON file: {exc}", file=sys.stderr)
            return 4

    return 0


if __name__ == "__main__":

    signal.signal(signal.SIGPIPE, signal.SIG_DFL)  # Ignore broken pipe
    sys.exit(main())
