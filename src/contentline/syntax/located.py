"""Located values: parsed tokens paired with their source byte range.

A Located holds the decoded text of a token together with the half-open
byte range ``[start, end)`` of the parsed buffer it was sliced from.

Python has no borrowed string views, so the text is an independent ``str``
and outliving the buffer is harmless. The offsets, however, only mean
something relative to the exact buffer that was parsed: do not apply them to
a buffer that was mutated or re-encoded after parsing.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Located"]


@dataclass(frozen=True, slots=True)
class Located[T]:
    """Value plus the byte range it was decoded from.

    Invariant: ``buffer[start:end]`` decodes to exactly ``value`` for the
    buffer passed to the parser.

    Attributes:
        value: Decoded token
        start: Starting byte offset (inclusive)
        end: Ending byte offset (exclusive)

    Example:
        >>> data = "FOO;BAR=baz:bex".encode()
        >>> name = Located("FOO", 0, 3)
        >>> name.slice_of(data)
        b'FOO'
        >>> name.span
        (0, 3)
    """

    value: T
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate range invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"Located start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Located end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def span(self) -> tuple[int, int]:
        """Byte range as a (start, end) tuple."""
        return (self.start, self.end)

    @property
    def length(self) -> int:
        """Length of the source range in bytes (not characters)."""
        return self.end - self.start

    def slice_of(self, buffer: bytes | bytearray | memoryview) -> bytes:
        """Return the bytes of ``buffer`` this value was decoded from.

        Args:
            buffer: The buffer that was parsed

        Raises:
            ValueError: If the range lies outside ``buffer``
        """
        if self.end > len(buffer):
            msg = f"Located end ({self.end}) exceeds buffer length ({len(buffer)})"
            raise ValueError(msg)
        return bytes(buffer[self.start : self.end])
