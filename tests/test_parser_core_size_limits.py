"""Tests for ContentLineParser: size limit configuration and logging."""

import logging

import pytest

from contentline import ContentLineParser, Property, parse
from contentline.constants import MAX_LINE_SIZE
from contentline.syntax.cursor import ParseError

_LOGGER = "contentline.syntax.parser.core"


class TestContentLineParserProperties:
    """Test ContentLineParser property accessors."""

    def test_max_line_size_default(self) -> None:
        """Default limit is MAX_LINE_SIZE."""
        assert ContentLineParser().max_line_size == MAX_LINE_SIZE == 1024 * 1024

    def test_max_line_size_custom(self) -> None:
        """Custom limits are kept."""
        assert ContentLineParser(max_line_size=5000).max_line_size == 5000

    def test_max_line_size_disabled(self) -> None:
        """0 disables the limit."""
        assert ContentLineParser(max_line_size=0).max_line_size == 0

    def test_keyword_only(self) -> None:
        """The limit must be passed by keyword."""
        with pytest.raises(TypeError):
            ContentLineParser(100)  # type: ignore[misc]


class TestContentLineParserSizeValidation:
    """Test line size validation in parse()."""

    def test_oversized_line_raises(self) -> None:
        """Lines over the limit raise ValueError before parsing."""
        parser = ContentLineParser(max_line_size=100)

        with pytest.raises(
            ValueError, match=r"Line size \(101 bytes\) exceeds maximum \(100 bytes\)"
        ):
            parser.parse(b"X:" + b"a" * 99)

    def test_error_message_includes_configuration_hint(self) -> None:
        """ValueError tells the caller how to raise the limit."""
        parser = ContentLineParser(max_line_size=10)

        with pytest.raises(ValueError, match="Configure max_line_size in ContentLineParser"):
            parser.parse(b"X:" + b"a" * 20)

    def test_thousands_separator_in_message(self) -> None:
        """Sizes are formatted with separators."""
        parser = ContentLineParser(max_line_size=1000)

        with pytest.raises(ValueError, match=r"\(1,001 bytes\)"):
            parser.parse(b"X" * 1001)

    def test_line_at_exact_limit(self) -> None:
        """A line exactly at the limit is parsed."""
        parser = ContentLineParser(max_line_size=10)

        result = parser.parse(b"X:12345678")

        assert isinstance(result, Property)

    def test_disabled_limit_accepts_large_line(self) -> None:
        """max_line_size=0 accepts anything."""
        parser = ContentLineParser(max_line_size=0)
        data = b"X:" + b"a" * (MAX_LINE_SIZE + 1)

        result = parser.parse(data)

        assert isinstance(result, Property)
        assert result.value.length == MAX_LINE_SIZE + 1

    def test_limit_does_not_change_results(self) -> None:
        """Below the limit, the parser returns exactly what parse() does."""
        parser = ContentLineParser()

        for data in (b"FOO;BAR=baz:bex", b"", b"A;", b"\xff"):
            assert parser.parse(data) == parse(data)


class TestContentLineParserLogging:
    """Debug logging of parse outcomes."""

    def test_logs_accepted_line(self, caplog: pytest.LogCaptureFixture) -> None:
        """Accepted lines log the property name and parameter count."""
        caplog.set_level(logging.DEBUG, logger=_LOGGER)

        ContentLineParser().parse(b"DTSTART;TZID=Europe/Riga;VALUE=DATE-TIME:20240101T090000")

        assert "Parsed property DTSTART with 2 parameter(s)" in caplog.messages

    def test_logs_rejected_line(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected lines log the reason code and byte range."""
        caplog.set_level(logging.DEBUG, logger=_LOGGER)

        result = ContentLineParser().parse(b'A;B="c" x:v')

        assert isinstance(result, ParseError)
        assert "Rejected content line: NO_COMMA_ETC at bytes 7..8" in caplog.messages

    def test_line_content_never_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Only metadata is logged, never the value."""
        caplog.set_level(logging.DEBUG, logger=_LOGGER)

        ContentLineParser().parse(b"X-SECRET:hunter2")

        assert all("hunter2" not in message for message in caplog.messages)

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Nothing is logged at INFO and above."""
        caplog.set_level(logging.INFO, logger=_LOGGER)

        ContentLineParser().parse(b"X")

        assert caplog.records == []
