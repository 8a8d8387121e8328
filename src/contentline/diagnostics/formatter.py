"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def _escape_char(char: str) -> str:
    """Render a character so it cannot inject terminal or log control codes."""
    if char.isprintable():
        return char
    code = ord(char)
    if code <= 0xFF:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _escape(text: str) -> str:
    return "".join(_escape_char(c) for c in text)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.no_param_name(Segment(2, 2))
        >>> print(formatter.format(diagnostic, b"A;"))
        error[NO_PARAM_NAME]: Expected a parameter name after ';' at byte 2
          --> byte 2
           |
           | A;
           |   ^
          = help: Write parameters as ';NAME=value'
          = note: see https://www.rfc-editor.org/rfc/rfc5545#section-3.1

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        NO_PARAM_NAME: Expected a parameter name after ';' at byte 2
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic, source: bytes | None = None) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format
            source: Parsed buffer; when given, RUST output includes an
                excerpt with a caret under the offending byte

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by newlines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def excerpt(self, source: bytes, offset: int) -> tuple[str, int]:
        """Render source for display and locate a byte offset in it.

        Invalid UTF-8 is shown as backslash escapes, as are control
        characters (log injection prevention).

        Args:
            source: Parsed buffer
            offset: Byte offset to locate

        Returns:
            (display text, column of offset in the display text)
        """
        offset = max(0, min(offset, len(source)))
        before = _escape(source[:offset].decode("utf-8", errors="backslashreplace"))
        after = _escape(source[offset:].decode("utf-8", errors="backslashreplace"))
        text = before + after
        column = len(before)
        if self.sanitize and len(text) > self.max_content_length:
            # Keep a window around the caret
            start = max(0, column - self.max_content_length // 2)
            text = text[start : start + self.max_content_length]
            column -= start
        return text, column

    def _format_rust(self, diagnostic: Diagnostic, source: bytes | None) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NO_COMMA_ETC]: Expected ',', ';' or ':' after parameter value at byte 7
              --> byte 7
              = help: Nothing may follow a closing '"' except ',', ';' or ':'
        """
        label = "error"
        label_str = f"\033[1;31m{label}\033[0m" if self.color else label  # Bold red

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{label_str}[{diagnostic.code.value}]: {message}"]

        segment = diagnostic.segment
        if segment is not None:
            if len(segment) > 1:
                parts.append(f"  --> bytes {segment.start}..{segment.end}")
            else:
                parts.append(f"  --> byte {segment.start}")
            if source is not None:
                text, column = self.excerpt(source, segment.start)
                parts.append("   |")
                parts.append(f"   | {text}")
                parts.append("   | " + " " * column + "^")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            NO_PROPERTY_VALUE: Content line ended before the ':' that introduces the value
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.value}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "UTF8_ERROR", "message": "...", "start": 5, "end": 6}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
        }

        if diagnostic.segment is not None:
            data["start"] = diagnostic.segment.start
            data["end"] = diagnostic.segment.end

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
