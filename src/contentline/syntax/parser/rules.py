"""Grammar rules for content lines.

    contentline = name *(";" param) ":" value
    param       = param-name "=" param-value *("," param-value)
    param-value = DQUOTE *(any scalar except DQUOTE) DQUOTE
                / *(any scalar except DQUOTE "," ";" ":")
    name        = 1*(any scalar except ":" ";" "=" "," DQUOTE "/")
    value       = *(any scalar)

Each rule takes an immutable Cursor and returns either a ParseResult with the
advanced cursor or a ParseError. Rules never catch InvalidUtf8Error: it
propagates to the entry point in core.py, which is what makes an encoding
failure win whenever it sits at a lower offset than a grammar failure.

Error precedence:
    A concretely wrong character fails on the spot (NO_PROPERTY_NAME,
    NO_PARAM_NAME, NO_COMMA_ETC, UNEXPECTED_DOUBLE_QUOTE). Anything that
    merely runs out of input before the top-level ':' (including an
    unterminated quoted value) ends in unterminated_line(), which still
    validates the remaining bytes before reporting NO_PROPERTY_VALUE.
"""

from contentline.constants import (
    DQUOTE,
    NAME_EXCLUDED_CHARS,
    PARAM_SEPARATOR,
    PARAM_VALUE_ASSIGN,
    PARAM_VALUE_SEPARATOR,
    UNQUOTED_VALUE_EXCLUDED_CHARS,
    VALUE_SEPARATOR,
)
from contentline.diagnostics import ErrorKind, Segment
from contentline.syntax.ast import Parameter, Property
from contentline.syntax.cursor import Cursor, ParseError, ParseResult
from contentline.syntax.located import Located

__all__ = [
    "parse_content_line",
    "parse_name",
    "parse_param_value",
    "parse_param_values",
    "parse_parameter",
    "unterminated_line",
]

# Characters allowed right after a parameter value
_VALUE_TERMINATORS: frozenset[str] = frozenset(
    (PARAM_VALUE_SEPARATOR, PARAM_SEPARATOR, VALUE_SEPARATOR)
)


def unterminated_line(cursor: Cursor) -> ParseError:
    """Catch-all for input that ends before the top-level ':'.

    Walks (and so UTF-8 validates) the rest of the input first: an encoding
    error anywhere after ``cursor`` still takes precedence.
    """
    end = cursor.skip_to_eof()
    return ParseError(Segment.at(end.pos), ErrorKind.NO_PROPERTY_VALUE)


def parse_name(cursor: Cursor) -> ParseResult[Located[str]] | None:
    """Parse a property or parameter name.

    Returns:
        ParseResult with the located name, or None if the run is empty
        (cursor on a delimiter, or at EOF)
    """
    start = cursor
    while not cursor.is_eof and cursor.current not in NAME_EXCLUDED_CHARS:
        cursor = cursor.advance()

    if cursor.pos == start.pos:
        return None

    name = Located(start.slice_to(cursor.pos), start.pos, cursor.pos)
    return ParseResult(name, cursor)


def _parse_quoted_value(cursor: Cursor) -> ParseResult[Located[str]] | ParseError:
    """Parse the body of a quoted value; cursor is just past the opening quote."""
    start = cursor
    while True:
        if cursor.is_eof:
            return unterminated_line(cursor)
        if cursor.current == DQUOTE:
            break
        cursor = cursor.advance()

    value = Located(start.slice_to(cursor.pos), start.pos, cursor.pos)
    return ParseResult(value, cursor.advance())


def _parse_unquoted_value(cursor: Cursor) -> ParseResult[Located[str]] | ParseError:
    start = cursor
    while not cursor.is_eof and cursor.current not in UNQUOTED_VALUE_EXCLUDED_CHARS:
        cursor = cursor.advance()

    # Only reachable after at least one character: a leading quote selects
    # the quoted branch instead.
    if cursor.peek() == DQUOTE:
        return ParseError(cursor.char_segment(), ErrorKind.UNEXPECTED_DOUBLE_QUOTE)

    value = Located(start.slice_to(cursor.pos), start.pos, cursor.pos)
    return ParseResult(value, cursor)


def parse_param_value(cursor: Cursor) -> ParseResult[Located[str]] | ParseError:
    """Parse one parameter value, quoted or unquoted.

    After the value, the next character must be ',', ';', ':' or EOF;
    anything else is NO_COMMA_ETC.
    """
    quoted = cursor.expect(DQUOTE)
    result = _parse_quoted_value(quoted) if quoted is not None else _parse_unquoted_value(cursor)
    if isinstance(result, ParseError):
        return result

    after = result.cursor
    next_char = after.peek()
    if next_char is not None and next_char not in _VALUE_TERMINATORS:
        return ParseError(after.char_segment(), ErrorKind.NO_COMMA_ETC)
    return result


def parse_param_values(cursor: Cursor) -> ParseResult[tuple[Located[str], ...]] | ParseError:
    """Parse a comma-separated value list (always at least one value)."""
    values: list[Located[str]] = []
    while True:
        result = parse_param_value(cursor)
        if isinstance(result, ParseError):
            return result
        values.append(result.value)
        cursor = result.cursor

        comma = cursor.expect(PARAM_VALUE_SEPARATOR)
        if comma is None:
            break
        cursor = comma

    return ParseResult(tuple(values), cursor)


def parse_parameter(cursor: Cursor) -> ParseResult[Parameter] | ParseError:
    """Parse ``NAME=value[,value]*``; cursor is just past the ';'."""
    name = parse_name(cursor)
    if name is None:
        return ParseError(cursor.char_segment(), ErrorKind.NO_PARAM_NAME)

    cursor = name.cursor
    assign = cursor.expect(PARAM_VALUE_ASSIGN)
    if assign is None:
        # Name stopped on ':', ';', ',', '"', '/' or EOF
        return unterminated_line(cursor)

    values = parse_param_values(assign)
    if isinstance(values, ParseError):
        return values

    return ParseResult(Parameter(name=name.value, values=values.value), values.cursor)


def parse_content_line(cursor: Cursor) -> Property | ParseError:
    """Parse a complete, non-empty content line.

    Raises:
        InvalidUtf8Error: Propagated from the cursor; converted by the caller
    """
    name = parse_name(cursor)
    if name is None:
        return ParseError(cursor.char_segment(), ErrorKind.NO_PROPERTY_NAME)
    cursor = name.cursor

    parameters: list[Parameter] = []
    while (semicolon := cursor.expect(PARAM_SEPARATOR)) is not None:
        parameter = parse_parameter(semicolon)
        if isinstance(parameter, ParseError):
            return parameter
        parameters.append(parameter.value)
        cursor = parameter.cursor

    colon = cursor.expect(VALUE_SEPARATOR)
    if colon is None:
        return unterminated_line(cursor)

    end = colon.skip_to_eof()
    value = Located(colon.slice_to(end.pos), colon.pos, end.pos)
    return Property(name=name.value, parameters=tuple(parameters), value=value)
