"""Shared constants for contentline.

This module provides the grammar delimiters and configuration defaults used
across the syntax and diagnostics packages. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar delimiters: Characters with structural meaning in a content line
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar delimiters
    "PARAM_SEPARATOR",
    "VALUE_SEPARATOR",
    "PARAM_VALUE_ASSIGN",
    "PARAM_VALUE_SEPARATOR",
    "DQUOTE",
    "NAME_EXCLUDED_CHARS",
    "UNQUOTED_VALUE_EXCLUDED_CHARS",
    "QUOTE_REQUIRED_CHARS",
    # Input limits
    "MAX_LINE_SIZE",
]

# ============================================================================
# GRAMMAR DELIMITERS
# ============================================================================
#
# NAME[;PARAM=value[,value]*]*:VALUE
#
# Only ASCII delimiters carry structure. Every other Unicode scalar value is
# content, including control characters.

PARAM_SEPARATOR: str = ";"
VALUE_SEPARATOR: str = ":"
PARAM_VALUE_ASSIGN: str = "="
PARAM_VALUE_SEPARATOR: str = ","
DQUOTE: str = '"'

# Characters that end a property or parameter name.
# "/" is excluded at every position, so a name can never start with ":" or "/".
NAME_EXCLUDED_CHARS: frozenset[str] = frozenset(':;=,"/')

# Characters that end an unquoted parameter value.
UNQUOTED_VALUE_EXCLUDED_CHARS: frozenset[str] = frozenset('",;:')

# Parameter values containing any of these must be DQUOTE-wrapped on output.
QUOTE_REQUIRED_CHARS: frozenset[str] = frozenset(",;:")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum content line size in bytes (1 MiB).
# RFC 5545 recommends folding at 75 octets, so unfolded lines are small;
# 1 MiB still admits inline BINARY attachments.
MAX_LINE_SIZE: int = 1024 * 1024
