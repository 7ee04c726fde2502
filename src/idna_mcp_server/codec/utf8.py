"""Strict single code point UTF-8 decoding.

The decoder works on a cursor over a bytes-like object: a read position and an
exclusive end index. Each call decodes exactly one code point and always moves
the cursor forward, also when the sequence is rejected, so a scan can resume
right after the bad bytes.

Rejected forms:
 - stray continuation bytes (0x80-0xBF) and the lead bytes 0xF8-0xFF
 - sequences truncated by the end of the input
 - continuation bytes outside 0x80-0xBF
 - overlong forms (which covers the 0xC0 and 0xC1 lead bytes)
 - UTF-16 surrogates 0xD800-0xDFFF
 - values above 0x10FFFF (which covers the 0xF5-0xF7 lead bytes)
"""

from typing import Iterator, Tuple

INVALID_CODE_POINT = -1
MAX_CODE_POINT = 0x10FFFF

# Smallest value that legitimately needs a sequence of the given length.
_MIN_VALUE = {2: 0x80, 3: 0x800, 4: 0x10000}


def sequence_length(lead: int) -> int:
    """Return the sequence length announced by a lead byte, or 0 if illegal."""
    if lead < 0x80:
        return 1
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    if lead < 0xF8:
        return 4
    return 0


def decode_code_point(data: bytes, pos: int, end: int | None = None) -> Tuple[int, int]:
    """Decode one code point starting at ``pos``.

    Args:
        data: Bytes-like object holding UTF-8 text.
        pos: Read position, must be lower than ``end``.
        end: Exclusive end of the readable range. Defaults to ``len(data)``.

    Returns:
        Tuple[int, int]: (code_point, new_pos). ``code_point`` is
        ``INVALID_CODE_POINT`` when the sequence is rejected; ``new_pos`` is
        always greater than ``pos``.
    """
    if end is None:
        end = len(data)
    if pos >= end:
        raise IndexError(f"Read position {pos} is past the end of input ({end})")

    lead = data[pos]
    length = sequence_length(lead)
    if length == 1:
        return lead, pos + 1
    if length == 0:
        return INVALID_CODE_POINT, pos + 1

    stop = pos + length
    if stop > end:
        # Truncated: everything up to the end was inspected.
        return INVALID_CODE_POINT, end

    value = lead & (0xFF >> (length + 1))
    valid = True
    for index in range(pos + 1, stop):
        byte = data[index]
        if byte & 0xC0 != 0x80:
            valid = False
        value = (value << 6) | (byte & 0x3F)

    if not valid:
        return INVALID_CODE_POINT, stop
    if value < _MIN_VALUE[length]:
        return INVALID_CODE_POINT, stop
    if value > MAX_CODE_POINT:
        return INVALID_CODE_POINT, stop
    if 0xD800 <= value <= 0xDFFF:
        return INVALID_CODE_POINT, stop
    return value, stop


def iter_code_points(
    data: bytes, start: int = 0, end: int | None = None
) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(code_point, offset, length)`` for every sequence in the range.

    Invalid sequences are yielded with ``INVALID_CODE_POINT``; the caller
    decides whether to stop.
    """
    if end is None:
        end = len(data)
    pos = start
    while pos < end:
        code_point, next_pos = decode_code_point(data, pos, end)
        yield code_point, pos, next_pos - pos
        pos = next_pos
