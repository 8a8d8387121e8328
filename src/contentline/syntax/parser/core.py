"""Core content line parser.

This module provides the ``parse()`` entry point and the configurable
ContentLineParser front end. Grammar rules live in
:mod:`contentline.syntax.parser.rules`.

Architecture:
    The scanner makes a single left-to-right pass with an immutable
    :class:`~contentline.syntax.cursor.Cursor` over the raw bytes, decoding
    one UTF-8 scalar at a time. Rules return either a ParseResult or a
    ParseError; an ill-formed UTF-8 sequence raises InvalidUtf8Error from the
    cursor, which is converted here into a UTF8_ERROR result. Nothing but a
    Property or a ParseError ever leaves ``parse()``.

Security:
    ContentLineParser includes a configurable input size limit to prevent
    DoS attacks via unbounded memory allocation from huge lines.

Thread Safety:
    ``parse()`` is a pure function; ContentLineParser is immutable after
    construction. Both are safe to call concurrently.
"""

import logging

from contentline.constants import MAX_LINE_SIZE
from contentline.diagnostics import ContentLineSyntaxError, ErrorKind, Segment
from contentline.syntax.ast import Property
from contentline.syntax.cursor import Cursor, ParseError
from contentline.syntax.parser.rules import parse_content_line
from contentline.syntax.utf8 import InvalidUtf8Error

__all__ = ["ContentLineParser", "parse", "parse_or_raise"]

logger = logging.getLogger(__name__)


def parse(data: bytes | bytearray | memoryview) -> Property | ParseError:
    """Parse one content line.

    Args:
        data: Raw bytes of a single, already unfolded content line (no
            trailing CRLF)

    Returns:
        Property on success, otherwise a ParseError locating the first
        offending byte

    Example:
        >>> prop = parse(b"FOO;BAR=baz:bex")
        >>> prop.name.value, prop.get_parameter_values("bar"), prop.value.value
        ('FOO', ('baz',), 'bex')
        >>> parse(b"A;").reason()
        'NO_PARAM_NAME'
    """
    source = bytes(data)
    if not source:
        return ParseError(Segment.at(0), ErrorKind.EMPTY_CONTENT_LINE)

    try:
        return parse_content_line(Cursor(source, 0))
    except InvalidUtf8Error as e:
        return ParseError(e.segment, ErrorKind.UTF8_ERROR)


def parse_or_raise(data: bytes | bytearray | memoryview) -> Property:
    """Parse one content line, raising on failure.

    Raises:
        ContentLineSyntaxError: Carrying the ParseError
    """
    result = parse(data)
    if isinstance(result, ParseError):
        raise ContentLineSyntaxError(result)
    return result


class ContentLineParser:
    """Content line parser with input limits and logging.

    Security:
    - Configurable max_line_size prevents DoS via huge inputs
    - Default limit: 1 MiB

    Attributes:
        max_line_size: Maximum allowed line size in bytes (default: 1 MiB)
    """

    __slots__ = ("_max_line_size",)

    def __init__(self, *, max_line_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_line_size: Maximum line size in bytes (default: 1 MiB).
                           Set to 0 to disable the limit (not recommended).
        """
        self._max_line_size = max_line_size if max_line_size is not None else MAX_LINE_SIZE

    @property
    def max_line_size(self) -> int:
        """Maximum allowed line size in bytes."""
        return self._max_line_size

    def parse(self, data: bytes | bytearray | memoryview) -> Property | ParseError:
        """Parse one content line.

        Args:
            data: Raw bytes of a single content line

        Returns:
            Property on success, otherwise a ParseError

        Raises:
            ValueError: If data exceeds max_line_size (DoS prevention)
        """
        if self._max_line_size > 0 and len(data) > self._max_line_size:
            msg = (
                f"Line size ({len(data):,} bytes) exceeds maximum "
                f"({self._max_line_size:,} bytes). "
                "Configure max_line_size in ContentLineParser constructor to increase limit."
            )
            raise ValueError(msg)

        result = parse(data)
        if isinstance(result, ParseError):
            logger.debug(
                "Rejected content line: %s at bytes %d..%d",
                result.reason(),
                result.segment.start,
                result.segment.end,
            )
        else:
            logger.debug(
                "Parsed property %s with %d parameter(s)",
                result.name.value,
                len(result.parameters),
            )
        return result

    def parse_or_raise(self, data: bytes | bytearray | memoryview) -> Property:
        """Parse one content line, raising on failure.

        Raises:
            ValueError: If data exceeds max_line_size
            ContentLineSyntaxError: If the line is malformed
        """
        result = self.parse(data)
        if isinstance(result, ParseError):
            raise ContentLineSyntaxError(result)
        return result
