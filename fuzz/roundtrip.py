#!/usr/bin/env python3
"""Roundtrip Fuzzer (Atheris).

For every input the parser accepts, checks that serialize() produces a line
that parses back to the same record, and that serialization is stable.

Usage:
    python fuzz/roundtrip.py
    python fuzz/roundtrip.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

_fuzz_stats: dict[str, int | str] = {
    "status": "incomplete",
    "iterations": 0,
    "accepted": 0,
    "findings": 0,
}


def _emit_final_report() -> None:
    """Emit JSON summary on exit (crash-proof reporting)."""
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("-" * 80, file=sys.stderr)
    print("ERROR: 'atheris' not found.", file=sys.stderr)
    print("Install the fuzz extra: pip install -e '.[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

logging.getLogger("contentline").setLevel(logging.CRITICAL)

with atheris.instrument_imports():
    from contentline import Property, parse, serialize


class RoundtripFailure(Exception):  # noqa: N818 - Domain-specific name
    """Raised when serialize -> parse does not reproduce the record."""


def TestOneInput(data: bytes) -> None:  # noqa: N802 - Atheris required name
    """Atheris entry point: roundtrip every accepted line."""
    global _fuzz_stats  # noqa: PLW0602 - Required for crash-proof reporting

    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    first = parse(data)
    if not isinstance(first, Property):
        return
    _fuzz_stats["accepted"] = int(_fuzz_stats["accepted"]) + 1

    text = serialize(first)
    second = parse(text.encode("utf-8"))

    if not isinstance(second, Property) or second.to_dict() != first.to_dict():
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        _fuzz_stats["status"] = "finding"
        msg = f"Roundtrip changed {data!r} -> {text!r} -> {second!r}"
        raise RoundtripFailure(msg)

    if serialize(second) != text:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        _fuzz_stats["status"] = "finding"
        msg = f"Serialization not stable for {data!r}"
        raise RoundtripFailure(msg)


def main() -> None:
    """Run the roundtrip fuzzer."""
    print()
    print("=" * 80)
    print("Roundtrip Fuzzer")
    print("=" * 80)
    print("Target: parse -> serialize -> parse")
    print("Press Ctrl+C to stop.")
    print("=" * 80)
    print()

    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
