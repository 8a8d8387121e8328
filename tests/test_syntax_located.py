"""Tests for syntax.located: Located values and their byte ranges."""

from __future__ import annotations

import pytest
from hypothesis import event, given

from contentline import Located, Property, parse
from tests.strategies import valid_lines


class TestLocatedConstruction:
    """Test Located construction and validation."""

    def test_create_located(self) -> None:
        """Located stores value and range."""
        located = Located("FOO", 0, 3)

        assert located.value == "FOO"
        assert located.span == (0, 3)
        assert located.length == 3

    def test_empty_range_allowed(self) -> None:
        """Zero-length ranges represent empty tokens."""
        located = Located("", 5, 5)

        assert located.length == 0

    def test_negative_start_rejected(self) -> None:
        """Negative offsets are invalid."""
        with pytest.raises(ValueError, match="start must be >= 0"):
            Located("x", -1, 0)

    def test_end_before_start_rejected(self) -> None:
        """End cannot precede start."""
        with pytest.raises(ValueError, match=r"end \(2\) must be >= start \(3\)"):
            Located("x", 3, 2)

    def test_located_is_immutable(self) -> None:
        """Located is a frozen dataclass."""
        located = Located("x", 0, 1)

        with pytest.raises(AttributeError):
            located.start = 4  # type: ignore[misc]

    def test_length_counts_bytes_not_characters(self) -> None:
        """Length is measured in bytes of the source buffer."""
        data = "é:".encode()
        result = parse(data)

        assert isinstance(result, Property)
        assert result.name.value == "é"
        assert result.name.length == 2


class TestLocatedSliceOf:
    """Test slicing the source buffer back out."""

    def test_slice_of_returns_source_bytes(self) -> None:
        """slice_of returns the exact bytes the value came from."""
        data = b"FOO;BAR=baz:bex"

        assert Located("baz", 8, 11).slice_of(data) == b"baz"

    def test_slice_of_accepts_bytearray_and_memoryview(self) -> None:
        """Any bytes-like buffer can be sliced."""
        data = b"FOO:bar"
        located = Located("bar", 4, 7)

        assert located.slice_of(bytearray(data)) == b"bar"
        assert located.slice_of(memoryview(data)) == b"bar"

    def test_slice_of_out_of_range(self) -> None:
        """A range past the buffer is rejected."""
        with pytest.raises(ValueError, match="exceeds buffer length"):
            Located("bar", 4, 7).slice_of(b"FOO")

    @given(data=valid_lines())
    def test_every_located_token_decodes_to_its_value(self, data: bytes) -> None:
        """Property: every Located in a parse result slices back to its value."""
        result = parse(data)
        assert isinstance(result, Property)

        tokens = [result.name, result.value]
        for parameter in result.parameters:
            tokens.append(parameter.name)
            tokens.extend(parameter.values)
        event(f"token_count={min(len(tokens), 10)}")

        for token in tokens:
            assert token.slice_of(data).decode("utf-8") == token.value
