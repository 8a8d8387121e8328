"""Incremental UTF-8 scalar decoding.

Decodes one Unicode scalar value at a time so the scanner can interleave
encoding validation with grammar checks, reporting whichever failure occurs
at the lower byte offset.

Well-formed sequences (Unicode Standard, Table 3-7):

    Code points        | 1st byte | 2nd byte | 3rd byte | 4th byte
    U+0000..U+007F     | 00..7F   |          |          |
    U+0080..U+07FF     | C2..DF   | 80..BF   |          |
    U+0800..U+0FFF     | E0       | A0..BF   | 80..BF   |
    U+1000..U+CFFF     | E1..EC   | 80..BF   | 80..BF   |
    U+D000..U+D7FF     | ED       | 80..9F   | 80..BF   |
    U+E000..U+FFFF     | EE..EF   | 80..BF   | 80..BF   |
    U+10000..U+3FFFF   | F0       | 90..BF   | 80..BF   | 80..BF
    U+40000..U+FFFFF   | F1..F3   | 80..BF   | 80..BF   | 80..BF
    U+100000..U+10FFFF | F4       | 80..8F   | 80..BF   | 80..BF

Error ranges follow the "maximal subpart" practice (the lead byte plus every
continuation byte that was still valid), which is also what CPython's strict
codec reports in ``UnicodeDecodeError.start`` / ``.end``.

Python 3.13+. Zero external dependencies.
"""

from contentline.diagnostics import Segment

__all__ = ["InvalidUtf8Error", "decode_scalar"]

_CONTINUATION_MIN: int = 0x80
_CONTINUATION_MAX: int = 0xBF


class InvalidUtf8Error(ValueError):
    """Ill-formed UTF-8 at a byte range.

    Raised by decode_scalar(). The scanner converts it into a UTF8_ERROR
    parse result; it never escapes ``parse()``.

    Attributes:
        start: Offset of the first offending byte
        end: End of the maximal ill-formed subpart (exclusive)
    """

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Invalid UTF-8 sequence at bytes {start}..{end}")
        self.start = start
        self.end = end

    @property
    def segment(self) -> Segment:
        """Byte range of the ill-formed subpart."""
        return Segment(self.start, self.end)


def _sequence_shape(lead: int) -> tuple[int, int, int, int] | None:
    """Return (continuation count, lead payload, 2nd byte min, 2nd byte max)."""
    if 0xC2 <= lead <= 0xDF:
        return (1, lead & 0x1F, _CONTINUATION_MIN, _CONTINUATION_MAX)
    if lead == 0xE0:
        return (2, lead & 0x0F, 0xA0, _CONTINUATION_MAX)
    if lead == 0xED:
        # Excludes UTF-16 surrogates D800..DFFF
        return (2, lead & 0x0F, _CONTINUATION_MIN, 0x9F)
    if 0xE1 <= lead <= 0xEF:
        return (2, lead & 0x0F, _CONTINUATION_MIN, _CONTINUATION_MAX)
    if lead == 0xF0:
        return (3, lead & 0x07, 0x90, _CONTINUATION_MAX)
    if lead == 0xF4:
        # Caps the range at U+10FFFF
        return (3, lead & 0x07, _CONTINUATION_MIN, 0x8F)
    if 0xF1 <= lead <= 0xF3:
        return (3, lead & 0x07, _CONTINUATION_MIN, _CONTINUATION_MAX)
    return None


def decode_scalar(data: bytes, pos: int) -> tuple[str, int]:
    """Decode the scalar value starting at ``pos``.

    Args:
        data: Source buffer
        pos: Offset of a lead byte (must be < len(data))

    Returns:
        (character, width in bytes)

    Raises:
        InvalidUtf8Error: If the bytes at ``pos`` are not well-formed UTF-8

    Example:
        >>> decode_scalar("bé".encode(), 1)
        ('é', 2)
        >>> decode_scalar(b"b\\xc3a", 1)
        Traceback (most recent call last):
        ...
        contentline.syntax.utf8.InvalidUtf8Error: Invalid UTF-8 sequence at bytes 1..2
    """
    lead = data[pos]
    if lead < _CONTINUATION_MIN:
        return chr(lead), 1

    shape = _sequence_shape(lead)
    if shape is None:
        raise InvalidUtf8Error(pos, pos + 1)

    count, code_point, low, high = shape
    end = pos + 1
    for _ in range(count):
        if end >= len(data):
            # Truncated by end of input: every byte present was valid
            raise InvalidUtf8Error(pos, end)
        byte = data[end]
        if not low <= byte <= high:
            raise InvalidUtf8Error(pos, end)
        code_point = (code_point << 6) | (byte & 0x3F)
        end += 1
        low, high = _CONTINUATION_MIN, _CONTINUATION_MAX
    return chr(code_point), count + 1
