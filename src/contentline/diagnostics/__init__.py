"""Diagnostic system for contentline errors.

Provides the closed error taxonomy, byte segments, message templates and
formatting. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorKind, Segment
from .errors import ContentLineError, ContentLineSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ContentLineError",
    "ContentLineSyntaxError",
    "Diagnostic",
    "DiagnosticFormatter",
    "ErrorKind",
    "ErrorTemplate",
    "OutputFormat",
    "Segment",
]
