"""Content line syntax package.

Provides the byte-level parser, parsed records, located values and
serialization.

Python 3.13+.
"""

from .ast import Parameter, Property
from .cursor import Cursor, ParseError, ParseResult
from .located import Located
from .parser import ContentLineParser, parse, parse_or_raise
from .serializer import SerializationValidationError, serialize
from .utf8 import InvalidUtf8Error

__all__ = [
    "ContentLineParser",
    "Cursor",
    "InvalidUtf8Error",
    "Located",
    "Parameter",
    "ParseError",
    "ParseResult",
    "Property",
    "SerializationValidationError",
    "parse",
    "parse_or_raise",
    "serialize",
]
