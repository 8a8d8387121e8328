"""Parsed content line records.

Structure of ``FOO;BAR=baz,"q:x":bex``::

    Property(
        name=Located("FOO", 0, 3),
        parameters=(
            Parameter(
                name=Located("BAR", 4, 7),
                values=(Located("baz", 8, 11), Located("q:x", 13, 16)),
            ),
        ),
        value=Located("bex", 18, 21),
    )

Quoted parameter values are located on the text between the quotes.
This module does not interpret parameter or value contents.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

from .located import Located

__all__ = ["Parameter", "Property"]


@dataclass(frozen=True, slots=True)
class Parameter:
    """Named, ordered list of one or more values attached to a property.

    Attributes:
        name: Parameter name (non-empty)
        values: Values in textual order; at least one, possibly ""
    """

    name: Located[str]
    values: tuple[Located[str], ...]

    def __post_init__(self) -> None:
        """Validate parameter invariants."""
        if not self.name.value:
            msg = "Parameter name cannot be empty"
            raise ValueError(msg)
        if not self.values:
            msg = f"Parameter '{self.name.value}' must have at least one value"
            raise ValueError(msg)

    @property
    def value_strings(self) -> tuple[str, ...]:
        """Values without location information."""
        return tuple(value.value for value in self.values)


@dataclass(frozen=True, slots=True)
class Property:
    """A parsed content line.

    Attributes:
        name: Property name
        parameters: Parameters in textual order (may be empty)
        value: Everything after the top-level ':' (may be empty)
    """

    name: Located[str]
    parameters: tuple[Parameter, ...]
    value: Located[str]

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the first parameter with the given name (case-insensitive)."""
        folded = name.casefold()
        for parameter in self.parameters:
            if parameter.name.value.casefold() == folded:
                return parameter
        return None

    def get_parameter_values(self, name: str) -> tuple[str, ...]:
        """Return the values of the named parameter, or () when absent."""
        parameter = self.get_parameter(name)
        if parameter is None:
            return ()
        return parameter.value_strings

    def to_dict(self) -> dict[str, Any]:
        """Location-free plain representation.

        Example:
            >>> parse(b"FOO;BAR=baz:bex").to_dict()
            {'name': 'FOO', 'parameters': [{'name': 'BAR', 'values': ['baz']}], 'value': 'bex'}
        """
        return {
            "name": self.name.value,
            "parameters": [
                {"name": p.name.value, "values": list(p.value_strings)}
                for p in self.parameters
            ],
            "value": self.value.value,
        }
