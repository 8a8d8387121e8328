"""Hypothesis strategies for contentline property-based testing.

Usage:
    from tests.strategies import valid_lines, any_line_bytes
    from tests.strategies.lines import INVALID_UTF8_SAMPLES

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - names, param_values, content_line_parts
    - corrupted_lines, invalid_utf8_lines
"""

from .lines import (
    DELIMITERS,
    GRAMMAR_CHARS,
    INVALID_UTF8_SAMPLES,
    MULTIBYTE_SAMPLES,
    any_line_bytes,
    content_line_parts,
    corrupted_lines,
    grammar_chaos,
    invalid_utf8_lines,
    names,
    param_values,
    render_content_line,
    render_param_value,
    valid_lines,
)

__all__ = [
    "DELIMITERS",
    "GRAMMAR_CHARS",
    "INVALID_UTF8_SAMPLES",
    "MULTIBYTE_SAMPLES",
    "any_line_bytes",
    "content_line_parts",
    "corrupted_lines",
    "grammar_chaos",
    "invalid_utf8_lines",
    "names",
    "param_values",
    "render_content_line",
    "render_param_value",
    "valid_lines",
]
