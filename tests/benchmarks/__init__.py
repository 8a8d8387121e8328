"""Performance benchmarks for contentline.

Benchmarks use pytest-benchmark to measure and track performance of the
scanner, so that regressions in the per-scalar decode loop show up early.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
