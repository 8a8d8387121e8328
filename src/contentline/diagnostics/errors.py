"""contentline exception hierarchy with structured diagnostics.

Grammar failures are returned from ``parse()`` as values. These exceptions
exist for callers that prefer raising (``parse_or_raise()``) and for
programming errors such as serializing an unrepresentable property.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from contentline.syntax.cursor import ParseError


class ContentLineError(Exception):
    """Base exception for all contentline errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ContentLineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ContentLineSyntaxError(ContentLineError):
    """Content line rejected by the parser.

    Raised only by the raising entry points; ``parse()`` returns the
    underlying ParseError instead.

    Attributes:
        parse_error: The located error value the parser produced
    """

    def __init__(self, parse_error: "ParseError") -> None:
        """Initialize ContentLineSyntaxError.

        Args:
            parse_error: Error value returned by the scanner
        """
        super().__init__(parse_error.diagnostic)
        self.parse_error = parse_error

    @property
    def reason(self) -> str:
        """Stable reason code of the underlying parse error."""
        return self.parse_error.reason()
