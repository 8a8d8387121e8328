"""Content Line Examples - parsing, errors and serialization.

Demonstrates everything you can do with contentline:

1. Parse a content line and inspect its parts
2. Look up parameters
3. Handle malformed lines (reason codes and byte locations)
4. Render errors for humans and tools
5. Serialize records back to text
6. Parse a whole (already unfolded) iCalendar file

Python 3.13+.
"""

from __future__ import annotations


def example_1_basic_parsing() -> None:
    """Parse a line and inspect name, parameters and value."""
    from contentline import Property, parse

    print("=" * 60)
    print("Example 1: Basic Parsing")
    print("=" * 60)

    data = b'ATTENDEE;ROLE=REQ-PARTICIPANT;CN="Henry, Cabot":mailto:hcabot@example.com'
    result = parse(data)
    assert isinstance(result, Property)

    print(f"Name:  {result.name.value} (bytes {result.name.start}..{result.name.end})")
    for parameter in result.parameters:
        print(f"Param: {parameter.name.value} = {list(parameter.value_strings)}")
    print(f"Value: {result.value.value}")
    print()


def example_2_parameter_lookup() -> None:
    """Parameter names are matched case-insensitively."""
    from contentline import parse_or_raise

    print("=" * 60)
    print("Example 2: Parameter Lookup")
    print("=" * 60)

    prop = parse_or_raise(b"DTSTART;TZID=Europe/Riga:20240101T090000")
    print(f"TZID:  {prop.get_parameter_values('tzid')}")
    print(f"VALUE: {prop.get_parameter_values('VALUE')} (absent)")
    print()


def example_3_error_handling() -> None:
    """Malformed lines return a ParseError instead of raising."""
    from contentline import is_parse_error, parse

    print("=" * 60)
    print("Example 3: Error Handling")
    print("=" * 60)

    for data in (b"", b"SUMMARY", b"X;=a:b", b'X;A="b" c:d', b"X;A=b\"c\":d", b"X:\xff"):
        result = parse(data)
        if is_parse_error(result):
            print(f"{data!r:20} -> {result.reason()} at {result.segment.start}..{result.segment.end}")
    print()


def example_4_formatting() -> None:
    """Render a ParseError in every output format."""
    from contentline import parse
    from contentline.diagnostics import DiagnosticFormatter, OutputFormat
    from contentline.guards import is_parse_error

    print("=" * 60)
    print("Example 4: Error Formatting")
    print("=" * 60)

    data = b'ATTENDEE;CN="Henry" Cabot:mailto:hcabot@example.com'
    result = parse(data)
    assert is_parse_error(result)

    print(result.format_error(data))
    print()
    for output_format in (OutputFormat.SIMPLE, OutputFormat.JSON):
        formatter = DiagnosticFormatter(output_format=output_format)
        print(result.format_error(formatter=formatter))
    print()


def example_5_serialization() -> None:
    """Serialize records; quotes are added only where required."""
    from contentline import parse_or_raise, serialize

    print("=" * 60)
    print("Example 5: Serialization")
    print("=" * 60)

    prop = parse_or_raise(b'X-TAGS;LIST="a","b:c",d:value')
    print(f"Normalized: {serialize(prop)}")
    print()


def example_6_whole_file() -> None:
    """Parse each line of an unfolded calendar with a size-limited parser."""
    from contentline import ContentLineParser, Property

    print("=" * 60)
    print("Example 6: Whole File")
    print("=" * 60)

    calendar = (
        b"BEGIN:VCALENDAR\r\n"
        b"VERSION:2.0\r\n"
        b"BEGIN:VEVENT\r\n"
        b"DTSTART;VALUE=DATE:20240101\r\n"
        b"SUMMARY:New Year\r\n"
        b"BROKEN LINE\r\n"
        b"END:VEVENT\r\n"
        b"END:VCALENDAR\r\n"
    )
    parser = ContentLineParser(max_line_size=8192)
    for number, line in enumerate(calendar.split(b"\r\n"), start=1):
        if not line:
            continue
        result = parser.parse(line)
        if isinstance(result, Property):
            print(f"{number:2}: {result.name.value}")
        else:
            print(f"{number:2}: error {result.reason()}")
    print()


def main() -> None:
    """Run all examples."""
    print()
    print("contentline Examples")
    print()

    example_1_basic_parsing()
    example_2_parameter_lookup()
    example_3_error_handling()
    example_4_formatting()
    example_5_serialization()
    example_6_whole_file()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
