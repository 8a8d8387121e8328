"""Immutable byte cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern over a raw byte buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Positions are byte offsets, characters are decoded Unicode scalars
    - UTF-8 is validated lazily, one scalar at a time, as the cursor moves
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from contentline.diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    ErrorKind,
    ErrorTemplate,
    Segment,
)

from .utf8 import decode_scalar

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker over bytes.

    Reading ``current`` decodes the scalar at ``pos`` and raises
    InvalidUtf8Error if the bytes there are ill-formed, so a grammar decision
    can never be made on an undecodable position.

    Example:
        >>> cursor = Cursor("bé:".encode(), 0)
        >>> cursor.current
        'b'
        >>> cursor = cursor.advance()
        >>> cursor.current, cursor.pos
        ('é', 1)
        >>> cursor.advance().pos  # 'é' is two bytes wide
        3
        >>> Cursor(b"hi", 2).is_eof
        True
    """

    source: bytes
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get the scalar value at the current position.

        Returns:
            Decoded character

        Raises:
            EOFError: If at end of input
            InvalidUtf8Error: If the bytes at pos are not well-formed UTF-8
        """
        if self.is_eof:
            msg = f"Unexpected EOF at byte {self.pos}"
            raise EOFError(msg)
        char, _ = decode_scalar(self.source, self.pos)
        return char

    def peek(self) -> str | None:
        """Current character, or None at EOF.

        Use for one-character lookahead on a delimiter:
        ``if cursor.peek() == ';':``

        Raises:
            InvalidUtf8Error: If the bytes at pos are not well-formed UTF-8
        """
        if self.is_eof:
            return None
        return self.current

    def advance(self) -> "Cursor":
        """Return new cursor past the current scalar.

        Returns:
            New Cursor instance (original unchanged); unchanged at EOF

        Raises:
            InvalidUtf8Error: If the bytes at pos are not well-formed UTF-8
        """
        if self.is_eof:
            return self
        _, width = decode_scalar(self.source, self.pos)
        return Cursor(self.source, self.pos + width)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Args:
            char: Expected character (single ASCII delimiter)

        Returns:
            New cursor advanced past ``char``, or None if no match or at EOF
        """
        if self.peek() == char:
            return Cursor(self.source, self.pos + len(char.encode()))
        return None

    def skip_to_eof(self) -> "Cursor":
        """Validate the remaining bytes and return a cursor at EOF.

        Raises:
            InvalidUtf8Error: At the first ill-formed sequence
        """
        cursor = self
        while not cursor.is_eof:
            cursor = cursor.advance()
        return cursor

    def slice_to(self, end_pos: int) -> str:
        """Decode source from current position to end_pos.

        Only call on a range the cursor has already walked (and therefore
        validated).

        Args:
            end_pos: End position (exclusive)
        """
        return self.source[self.pos : end_pos].decode("utf-8")

    def char_segment(self) -> Segment:
        """Segment of the current character, or a zero-length one at EOF.

        Raises:
            InvalidUtf8Error: If the bytes at pos are not well-formed UTF-8
        """
        if self.is_eof:
            return Segment.at(self.pos)
        _, width = decode_scalar(self.source, self.pos)
        return Segment(self.pos, self.pos + width)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every grammar rule has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Located parse failure.

    Two errors are equal when both segment and kind match; this is the
    equivalence the differential tests check.

    Attributes:
        segment: Byte range of the first offending input
        kind: Closed error taxonomy member

    Example:
        >>> error = ParseError(Segment(2, 2), ErrorKind.NO_PARAM_NAME)
        >>> error.reason()
        'NO_PARAM_NAME'
        >>> print(error.format_error(b"A;"))
        error[NO_PARAM_NAME]: Expected a parameter name after ';' at byte 2
          --> byte 2
           |
           | A;
           |   ^
          = help: Write parameters as ';NAME=value'
          = note: see https://www.rfc-editor.org/rfc/rfc5545#section-3.1
    """

    segment: Segment
    kind: ErrorKind

    def reason(self) -> str:
        """Stable reason code (e.g. ``"NO_COMMA_ETC"``)."""
        return self.kind.value

    @property
    def diagnostic(self) -> Diagnostic:
        """Rich diagnostic with message, hint and documentation link."""
        return ErrorTemplate.for_kind(self.kind, self.segment)

    @property
    def message(self) -> str:
        """Human-readable description."""
        return self.diagnostic.message

    def format_error(
        self, source: bytes | None = None, formatter: DiagnosticFormatter | None = None
    ) -> str:
        """Format error, with a source excerpt when the buffer is given.

        Args:
            source: The buffer that was parsed
            formatter: Formatter to use (default: Rust-style)

        Returns:
            Formatted error string
        """
        formatter = formatter if formatter is not None else DiagnosticFormatter()
        return formatter.format(self.diagnostic, source)
