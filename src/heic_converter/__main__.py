"""
CLI for replaying an object-finalize payload against the live bucket and store.

Usage:
  python -m heic_converter replay event.json
  cat event.json | heic-converter replay

The payload is the Cloud Storage object resource (bucket, name, contentType,
metadata). Settings come from the environment (see config.py).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from heic_converter.handler import handle_finalize
from heic_converter.pipeline import ConversionError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Replay a storage finalize event through the HEIC converter"
    )
    parser.add_argument(
        "subcommand",
        choices=["replay"],
        help="Subcommand",
    )
    parser.add_argument(
        "event_file",
        nargs="?",
        type=Path,
        default=None,
        help="JSON object resource (default: read stdin)",
    )
    args = parser.parse_args(argv)

    raw = args.event_file.read_text(encoding="utf-8") if args.event_file else sys.stdin.read()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Invalid event JSON: {e}", file=sys.stderr)
        return 2
    try:
        result = handle_finalize(payload)
    except ConversionError as e:
        print(e.to_result().model_dump_json(indent=2))
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
