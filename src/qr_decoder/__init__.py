"""
qr_decoder
==========

Library for decoding the data region of a QR symbol.

Takes the codeword stream produced by error correction plus the symbol
version and reconstructs the payload from its numeric, alphanumeric and
byte-mode segments.

Functions:
    - decode: Convert a codeword stream into payload bytes
    - decode_segments: Convert a codeword stream into Segment models
    - decode_numeric / decode_alphanumeric / decode_byte: Single segment decoders
    - length_bits / version_band: Length-field width lookups
"""

from .bits import BitCursor
from .decode import decode, decode_alphanumeric, decode_byte, decode_numeric, decode_segments
from .errors import (
    DecodeError,
    InsufficientBits,
    InvalidAlphanumericValue,
    UnsupportedMode,
    UnsupportedVersion,
)
from .tables import ALPHANUMERIC, LENGTH_BITS, Mode, VersionBand, length_bits, version_band

__all__ = [
    "ALPHANUMERIC",
    "LENGTH_BITS",
    "BitCursor",
    "DecodeError",
    "InsufficientBits",
    "InvalidAlphanumericValue",
    "Mode",
    "UnsupportedMode",
    "UnsupportedVersion",
    "VersionBand",
    "decode",
    "decode_alphanumeric",
    "decode_byte",
    "decode_numeric",
    "decode_segments",
    "length_bits",
    "version_band",
]
