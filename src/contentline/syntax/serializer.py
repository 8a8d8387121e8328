"""Serialize a Property back to content line syntax.

Converts parsed records to text. Useful for:
- Normalizing lines (quoting only where required)
- Generating lines from programmatically built records
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

from contentline.constants import (
    DQUOTE,
    NAME_EXCLUDED_CHARS,
    PARAM_SEPARATOR,
    PARAM_VALUE_ASSIGN,
    PARAM_VALUE_SEPARATOR,
    QUOTE_REQUIRED_CHARS,
    VALUE_SEPARATOR,
)

from .ast import Parameter, Property

__all__ = ["SerializationValidationError", "serialize"]


class SerializationValidationError(ValueError):
    """Raised when a Property cannot be written as a content line.

    Common causes:
    - Empty name, or a name containing a delimiter
    - Parameter value containing DQUOTE (no escape exists in the grammar)
    """


def _validate_name(name: str, context: str) -> None:
    if not name:
        msg = f"{context} name cannot be empty"
        raise SerializationValidationError(msg)
    bad = sorted(set(name) & NAME_EXCLUDED_CHARS)
    if bad:
        msg = f"{context} name {name!r} contains delimiter(s) {''.join(bad)!r}"
        raise SerializationValidationError(msg)


def _serialize_param_value(value: str, param_name: str) -> str:
    if DQUOTE in value:
        msg = f"Value of parameter '{param_name}' contains '\"': {value!r}"
        raise SerializationValidationError(msg)
    if any(char in QUOTE_REQUIRED_CHARS for char in value):
        return f"{DQUOTE}{value}{DQUOTE}"
    return value


def _serialize_parameter(parameter: Parameter) -> str:
    name = parameter.name.value
    _validate_name(name, "Parameter")
    values = PARAM_VALUE_SEPARATOR.join(
        _serialize_param_value(value, name) for value in parameter.value_strings
    )
    return f"{name}{PARAM_VALUE_ASSIGN}{values}"


def serialize(prop: Property) -> str:
    """Serialize a Property to content line text.

    Parameter values are quoted only when they contain ',', ';' or ':'.
    Locations are ignored.

    Args:
        prop: Property to serialize

    Returns:
        Content line without a line terminator

    Raises:
        SerializationValidationError: If the property is not representable

    Example:
        >>> serialize(parse('FOO;BAR="baz",",",:bex'.encode()))
        'FOO;BAR=baz,",",:bex'
    """
    _validate_name(prop.name.value, "Property")
    parts = [prop.name.value]
    for parameter in prop.parameters:
        parts.append(PARAM_SEPARATOR)
        parts.append(_serialize_parameter(parameter))
    parts.append(VALUE_SEPARATOR)
    parts.append(prop.value.value)
    return "".join(parts)
