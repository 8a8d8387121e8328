"""Diagnostic codes and data structures.

Defines the closed error taxonomy, byte segments, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Diagnostic",
    "ErrorKind",
    "Segment",
]


class ErrorKind(StrEnum):
    """Reason a content line was rejected.

    Inherits from ``StrEnum`` so that ``str(kind)`` and direct string
    comparisons yield the reason code itself. The member values are a stable
    public contract: downstream error messages and log aggregation may match
    on them, so they must never change.

    Kinds:
        EMPTY_CONTENT_LINE: Zero-length input
        NO_PROPERTY_NAME: Line does not start with a name character
        NO_PARAM_NAME: ";" not followed by a parameter name
        NO_PROPERTY_VALUE: Input ended before the top-level ":"
        NO_COMMA_ETC: Parameter value followed by something other than , ; :
        UNEXPECTED_DOUBLE_QUOTE: DQUOTE inside an unquoted parameter value
        UTF8_ERROR: Ill-formed UTF-8 byte sequence
    """

    EMPTY_CONTENT_LINE = "EMPTY_CONTENT_LINE"
    NO_PROPERTY_NAME = "NO_PROPERTY_NAME"
    NO_PARAM_NAME = "NO_PARAM_NAME"
    NO_PROPERTY_VALUE = "NO_PROPERTY_VALUE"
    NO_COMMA_ETC = "NO_COMMA_ETC"
    UNEXPECTED_DOUBLE_QUOTE = "UNEXPECTED_DOUBLE_QUOTE"
    UTF8_ERROR = "UTF8_ERROR"


@dataclass(frozen=True, slots=True)
class Segment:
    """Half-open byte range in the parsed buffer.

    A zero-length segment marks a boundary (e.g. end of input); otherwise
    ``start`` is the first offending byte.

    Attributes:
        start: Starting byte offset (inclusive)
        end: Ending byte offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate Segment invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"Segment.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Segment.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @classmethod
    def at(cls, pos: int) -> "Segment":
        """Zero-length segment at a byte boundary."""
        return cls(pos, pos)

    @property
    def is_empty(self) -> bool:
        """True for a zero-length boundary segment."""
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Error kind (its value is the stable reason code)
        message: Human-readable error description
        segment: Byte range of the offending input (None if not applicable)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
    """

    code: ErrorKind
    message: str
    segment: Segment | None = None
    hint: str | None = None
    help_url: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NO_PARAM_NAME]: Expected a parameter name after ';'
              --> byte 2
              = help: Parameter names cannot be empty or start with '=' or '/'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
