"""contentline - byte-level parser for iCalendar/vCard content lines.

Parses one content line ``NAME[;PARAM=value[,value]*]*:VALUE`` from raw bytes
into a Property with located name, parameters and value, or a ParseError
naming the first offending byte and a stable reason code.

Public API:
    parse - Parse bytes into Property | ParseError (never raises)
    parse_or_raise - Parse bytes into Property, raising ContentLineSyntaxError
    ContentLineParser - Parser with input size limit and logging
    serialize - Write a Property back as content line text
    Property, Parameter, Located - Parsed records
    ParseError, ErrorKind, Segment - Located error model

Exceptions:
    ContentLineError - Base exception class
    ContentLineSyntaxError - Malformed line (raising entry points only)
    SerializationValidationError - Property not representable as text

Submodules:
    contentline.syntax - Parser, records, cursor, UTF-8 decoding
    contentline.diagnostics - Error kinds, templates and formatting
    contentline.guards - TypeIs guards for parse results
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Diagnostics first: syntax modules import from it
from .diagnostics import (
    ContentLineError,
    ContentLineSyntaxError,
    ErrorKind,
    Segment,
)
from .guards import is_parse_error, is_property
from .syntax import (
    ContentLineParser,
    Located,
    Parameter,
    ParseError,
    Property,
    SerializationValidationError,
    parse,
    parse_or_raise,
    serialize,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("contentline")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Content line grammar reference
__spec_url__ = "https://www.rfc-editor.org/rfc/rfc5545#section-3.1"

__all__ = [
    "ContentLineError",
    "ContentLineParser",
    "ContentLineSyntaxError",
    "ErrorKind",
    "Located",
    "Parameter",
    "ParseError",
    "Property",
    "Segment",
    "SerializationValidationError",
    "__spec_url__",
    "__version__",
    "is_parse_error",
    "is_property",
    "parse",
    "parse_or_raise",
    "serialize",
]
