"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorKind, Segment

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    The reason code is carried by ``Diagnostic.code``; the message text is
    for humans and may be reworded between releases.
    """

    # RFC 5545 section 3.1 defines the content line grammar
    _DOCS_URL = "https://www.rfc-editor.org/rfc/rfc5545#section-3.1"

    @staticmethod
    def empty_content_line(segment: Segment) -> Diagnostic:
        """Zero-length input.

        Args:
            segment: Location of the error (always [0, 0))

        Returns:
            Diagnostic for EMPTY_CONTENT_LINE
        """
        return Diagnostic(
            code=ErrorKind.EMPTY_CONTENT_LINE,
            message="Content line is empty",
            segment=segment,
            hint="Skip blank lines before parsing",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def no_property_name(segment: Segment) -> Diagnostic:
        """Line does not begin with a property name.

        Args:
            segment: Location of the first character

        Returns:
            Diagnostic for NO_PROPERTY_NAME
        """
        return Diagnostic(
            code=ErrorKind.NO_PROPERTY_NAME,
            message=f"Expected a property name at byte {segment.start}",
            segment=segment,
            hint="A content line starts with a name such as 'DTSTART'; "
            "names cannot contain : ; = , \" or /",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def no_param_name(segment: Segment) -> Diagnostic:
        """Semicolon not followed by a parameter name.

        Args:
            segment: Location where the parameter name should start

        Returns:
            Diagnostic for NO_PARAM_NAME
        """
        return Diagnostic(
            code=ErrorKind.NO_PARAM_NAME,
            message=f"Expected a parameter name after ';' at byte {segment.start}",
            segment=segment,
            hint="Write parameters as ';NAME=value'",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def no_property_value(segment: Segment) -> Diagnostic:
        """Input ended before the ':' separating the value.

        Args:
            segment: Zero-length segment at end of input

        Returns:
            Diagnostic for NO_PROPERTY_VALUE
        """
        return Diagnostic(
            code=ErrorKind.NO_PROPERTY_VALUE,
            message="Content line ended before the ':' that introduces the value",
            segment=segment,
            hint="Add ':' after the name and parameters, or close an open quoted value",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def no_comma_etc(segment: Segment) -> Diagnostic:
        """Parameter value followed by an unexpected character.

        Args:
            segment: Location of the unexpected character

        Returns:
            Diagnostic for NO_COMMA_ETC
        """
        return Diagnostic(
            code=ErrorKind.NO_COMMA_ETC,
            message=f"Expected ',', ';' or ':' after parameter value at byte {segment.start}",
            segment=segment,
            hint="Nothing may follow a closing '\"' except ',', ';' or ':'",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def unexpected_double_quote(segment: Segment) -> Diagnostic:
        """DQUOTE inside an unquoted parameter value.

        Args:
            segment: Location of the quote character

        Returns:
            Diagnostic for UNEXPECTED_DOUBLE_QUOTE
        """
        return Diagnostic(
            code=ErrorKind.UNEXPECTED_DOUBLE_QUOTE,
            message=f"Unexpected '\"' inside unquoted parameter value at byte {segment.start}",
            segment=segment,
            hint="Quote the whole value ('\"a:b\"'); parameter values cannot contain '\"'",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def utf8_error(segment: Segment) -> Diagnostic:
        """Ill-formed UTF-8 sequence.

        Args:
            segment: Maximal ill-formed subpart of the sequence

        Returns:
            Diagnostic for UTF8_ERROR
        """
        return Diagnostic(
            code=ErrorKind.UTF8_ERROR,
            message=(
                f"Invalid UTF-8 sequence at bytes {segment.start}..{segment.end}"
            ),
            segment=segment,
            hint="Content lines must be UTF-8 encoded",
            help_url="https://www.rfc-editor.org/rfc/rfc5545#section-3.1.4",
        )

    @staticmethod
    def for_kind(kind: ErrorKind, segment: Segment) -> Diagnostic:
        """Build the diagnostic for any error kind.

        Args:
            kind: Error kind reported by the parser
            segment: Location reported by the parser

        Returns:
            Diagnostic with message, hint and documentation link
        """
        match kind:
            case ErrorKind.EMPTY_CONTENT_LINE:
                return ErrorTemplate.empty_content_line(segment)
            case ErrorKind.NO_PROPERTY_NAME:
                return ErrorTemplate.no_property_name(segment)
            case ErrorKind.NO_PARAM_NAME:
                return ErrorTemplate.no_param_name(segment)
            case ErrorKind.NO_PROPERTY_VALUE:
                return ErrorTemplate.no_property_value(segment)
            case ErrorKind.NO_COMMA_ETC:
                return ErrorTemplate.no_comma_etc(segment)
            case ErrorKind.UNEXPECTED_DOUBLE_QUOTE:
                return ErrorTemplate.unexpected_double_quote(segment)
            case ErrorKind.UTF8_ERROR:
                return ErrorTemplate.utf8_error(segment)
