#!/usr/bin/env python3
"""Stability Fuzzer (Atheris).

Feeds random bytes to the parser and detects unexpected exceptions.
parse() must never raise: every input yields a Property or a ParseError.
Any exception escaping it is reported as a finding.

Usage:
    python fuzz/stability.py
    python fuzz/stability.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# Crash-proof reporting: ensure summary is always emitted
_fuzz_stats: dict[str, int | str] = {"status": "incomplete", "iterations": 0, "findings": 0}


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
    print("On macOS, install LLVM first: brew install llvm", file=sys.stderr)
    print("Then set: export CC=$(brew --prefix llvm)/bin/clang", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

# Suppress parser logging during fuzzing
logging.getLogger("contentline").setLevel(logging.CRITICAL)

with atheris.instrument_imports():
    from contentline import ContentLineParser, Property
    from contentline.syntax.cursor import ParseError


class UnexpectedCrash(Exception):  # noqa: N818 - Domain-specific name
    """Raised when an unexpected exception is detected."""


_PARSER = ContentLineParser(max_line_size=64 * 1024)


def TestOneInput(data: bytes) -> None:  # noqa: N802 - Atheris required name
    """Atheris entry point: parse fuzzed input and detect unexpected crashes."""
    global _fuzz_stats  # noqa: PLW0602 - Required for crash-proof reporting

    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    if len(data) > _PARSER.max_line_size:
        return

    try:
        result = _PARSER.parse(data)
        if not isinstance(result, Property | ParseError):
            msg = f"parse() returned {type(result).__name__}"
            raise TypeError(msg)
    except Exception as e:
        # parse() has no expected exceptions: anything here is a finding
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        _fuzz_stats["status"] = "finding"

        print()
        print("=" * 80)
        print("[FINDING] STABILITY BREACH DETECTED")
        print("=" * 80)
        print(f"Exception: {type(e).__name__}: {e}")
        print(f"Input: {data!r}")
        print()
        print("Next steps:")
        print("  1. Create unit test in tests/ with the input as a bytes literal")
        print("  2. Add it to REGRESSION_CORPUS in tests/test_syntax_parser_differential.py")
        print("  3. Fix the bug, run tests to confirm")
        print("=" * 80)
        msg = f"{type(e).__name__}: {e}"
        raise UnexpectedCrash(msg) from e


def main() -> None:
    """Run the stability fuzzer."""
    print()
    print("=" * 80)
    print("Stability Fuzzer")
    print("=" * 80)
    print("Target: Content line parser crash detection")
    print("Contract: parse() never raises; returns Property | ParseError")
    print("Press Ctrl+C to stop. Findings saved to crash-* files")
    print("=" * 80)
    print()

    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
