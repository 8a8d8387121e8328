"""Fuzz testing infrastructure for contentline.

This package contains:
- shadow_parser: Regex-based reference parser for differential testing
- test_parser_oracle: Intensive differential tests (marked fuzz)

Python 3.13+.
"""
