"""Type guard functions for parse result type narrowing.

``parse()`` returns ``Property | ParseError``. The guards narrow that union
for mypy without an explicit isinstance() at every call site.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from contentline import parse
    >>> from contentline.guards import is_property
    >>> result = parse(b"DTSTART;VALUE=DATE:20240101")
    >>> if is_property(result):
    ...     # mypy knows result is Property
    ...     print(result.value.value)
    20240101
"""

from typing import TypeIs

from contentline.syntax.ast import Property
from contentline.syntax.cursor import ParseError

__all__ = [
    "is_parse_error",
    "is_property",
]


def is_property(result: Property | ParseError | None) -> TypeIs[Property]:
    """Type guard: Check if a parse result is a successfully parsed Property.

    Args:
        result: Value returned by parse()

    Returns:
        True if result is a Property, False for ParseError or None
    """
    return isinstance(result, Property)


def is_parse_error(result: Property | ParseError | None) -> TypeIs[ParseError]:
    """Type guard: Check if a parse result is a ParseError.

    Args:
        result: Value returned by parse()

    Returns:
        True if result is a ParseError
    """
    return isinstance(result, ParseError)
