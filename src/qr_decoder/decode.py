"""
qr_decoder.decode

Core decoding logic for the data region of a QR symbol.

The input is the codeword stream left after error correction, together with
the symbol version. The stream is a sequence of segments, each introduced by
a 4-bit mode tag and a version-dependent length field, and ended by a
terminator tag or by running out of bits.

Functions:
    - decode: Decodes a codeword stream into the payload bytes
    - decode_segments: Decodes a codeword stream into per-segment models
    - decode_numeric: Decodes one numeric segment body at the cursor
    - decode_alphanumeric: Decodes one alphanumeric segment body at the cursor
    - decode_byte: Decodes one byte-mode segment body at the cursor

Notes:
    - Only numeric, alphanumeric and byte modes are implemented. ECI, Kanji and
      structured-append tags raise UnsupportedMode.
    - Fewer than four bits left where a mode tag is expected ends the payload
      the same way an explicit terminator does.
"""

import logging
from typing import Callable

from common.models import Segment

from .bits import BitCursor
from .errors import InsufficientBits, InvalidAlphanumericValue, UnsupportedMode
from .tables import ALPHANUMERIC, MODE_BITS, Mode, length_bits

logger = logging.getLogger(__name__)


def _numeric_body(cursor: BitCursor, count: int) -> bytes:
    """Digits are packed in groups of three (10 bits), with a 7- or 4-bit tail group."""
    digits = []
    while count >= 3:
        digits.append(f"{cursor.read_or_raise(10, 'numeric data'):03d}")
        count -= 3

    if count == 2:
        digits.append(f"{cursor.read_or_raise(7, 'numeric data'):02d}")
    elif count == 1:
        digits.append(f"{cursor.read_or_raise(4, 'numeric data'):01d}")

    return "".join(digits).encode("ascii")


def _alphanumeric_body(cursor: BitCursor, count: int) -> bytes:
    """Symbols are packed in pairs as 45 * first + second (11 bits), with a 6-bit tail symbol."""
    symbols = []
    while count >= 2:
        value = cursor.read_or_raise(11, "alphanumeric data")
        first, second = divmod(value, len(ALPHANUMERIC))
        # second is always < 45; only first can overflow the alphabet
        if first >= len(ALPHANUMERIC):
            raise InvalidAlphanumericValue(first)
        symbols.append(ALPHANUMERIC[first])
        symbols.append(ALPHANUMERIC[second])
        count -= 2

    if count == 1:
        index = cursor.read_or_raise(6, "alphanumeric data")
        if index >= len(ALPHANUMERIC):
            raise InvalidAlphanumericValue(index)
        symbols.append(ALPHANUMERIC[index])

    return "".join(symbols).encode("ascii")


def _byte_body(cursor: BitCursor, count: int) -> bytes:
    octets = bytearray()
    for _ in range(count):
        octet = cursor.read_u8(8)
        if octet is None:
            raise InsufficientBits(8, "byte data")
        octets.append(octet)
    return bytes(octets)


_SEGMENT_BODIES: dict[Mode, Callable[[BitCursor, int], bytes]] = {
    Mode.NUMERIC: _numeric_body,
    Mode.ALPHANUMERIC: _alphanumeric_body,
    Mode.BYTE: _byte_body,
}


def _decode_segment(cursor: BitCursor, mode: Mode, version: int) -> tuple[int, bytes]:
    """Read the length field for mode and then the segment body. Returns (count, data)."""
    width = length_bits(mode, version)
    count = cursor.read_or_raise(width, f"{mode.name.lower()} length")
    data = _SEGMENT_BODIES[mode](cursor, count)
    logger.debug(f"{mode.name} ({count}) {data!r}")
    return count, data


def decode_numeric(cursor: BitCursor, version: int) -> bytes:
    """
    Decode a numeric segment whose mode tag has already been consumed.

    Returns the digits as ASCII bytes; leading zeros of each group are kept.
    """
    return _decode_segment(cursor, Mode.NUMERIC, version)[1]


def decode_alphanumeric(cursor: BitCursor, version: int) -> bytes:
    """Decode an alphanumeric segment whose mode tag has already been consumed."""
    return _decode_segment(cursor, Mode.ALPHANUMERIC, version)[1]


def decode_byte(cursor: BitCursor, version: int) -> bytes:
    """Decode a byte-mode segment. The octets are returned as-is, with no charset applied."""
    return _decode_segment(cursor, Mode.BYTE, version)[1]


def decode_segments(buffer: bytes, version: int) -> list[Segment]:
    """
    Decode every segment of a codeword stream.

    Args:
        buffer: Codeword stream after error correction.
        version: Symbol version, 1-40.

    Returns:
        list[Segment]: The decoded segments in stream order.

    Raises:
        DecodeError: on the first failing segment. Segments decoded before it
        are discarded.
    """
    cursor = BitCursor(buffer)
    segments: list[Segment] = []

    while True:
        start = cursor.offset
        tag = cursor.read_u8(MODE_BITS)
        if tag is None:
            # Running out of bits is treated as an implicit terminator
            logger.debug(f"End of stream at bit {start}, {cursor.remaining} bits left")
            break

        try:
            mode = Mode(tag)
        except ValueError:
            raise UnsupportedMode(tag) from None

        if mode is Mode.TERMINATOR:
            logger.debug(f"Terminator at bit {start}")
            break

        count, data = _decode_segment(cursor, mode, version)
        segments.append(
            Segment(
                mode=mode.name,
                char_count=count,
                data=data,
                start_bit=start,
                end_bit=cursor.offset,
            )
        )

    return segments


def decode(buffer: bytes, version: int) -> bytes:
    """
    Decode a codeword stream into the payload it carries.

    Fragments of all segments are concatenated byte for byte: numeric and
    alphanumeric text contributes its ASCII bytes, byte-mode segments their raw
    octets.

    Raises:
        DecodeError: if any segment fails; no partial output is returned.
    """
    return b"".join(segment.data for segment in decode_segments(buffer, version))
