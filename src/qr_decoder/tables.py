"""
qr_decoder.tables

Fixed lookup tables of the QR payload format.

Contents:
    - Mode: 4-bit segment mode tags
    - VersionBand: the three version ranges that select length-field widths
    - LENGTH_BITS: length-field width per mode and version band
    - ALPHANUMERIC: the 45-symbol alphanumeric alphabet
    - version_band / length_bits: table lookups that validate the version
"""

from enum import IntEnum

from .errors import UnsupportedVersion

MIN_VERSION = 1
MAX_VERSION = 40

MODE_BITS = 4  # Width of every mode tag


class Mode(IntEnum):
    """Segment mode tags implemented by this decoder."""

    TERMINATOR = 0b0000
    NUMERIC = 0b0001
    ALPHANUMERIC = 0b0010
    BYTE = 0b0100


class VersionBand(IntEnum):
    """Version ranges sharing the same length-field widths."""

    SMALL = 1  # versions 1-9
    MEDIUM = 2  # versions 10-26
    LARGE = 3  # versions 27-40


LENGTH_BITS: dict[Mode, dict[VersionBand, int]] = {
    Mode.NUMERIC: {VersionBand.SMALL: 10, VersionBand.MEDIUM: 12, VersionBand.LARGE: 14},
    Mode.ALPHANUMERIC: {VersionBand.SMALL: 9, VersionBand.MEDIUM: 11, VersionBand.LARGE: 13},
    Mode.BYTE: {VersionBand.SMALL: 8, VersionBand.MEDIUM: 16, VersionBand.LARGE: 16},
}

ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"


def version_band(version: int) -> VersionBand:
    """
    Map a symbol version to its band.

    Raises:
        UnsupportedVersion: if version is outside 1-40.
    """
    if MIN_VERSION <= version <= 9:
        return VersionBand.SMALL
    if 10 <= version <= 26:
        return VersionBand.MEDIUM
    if 27 <= version <= MAX_VERSION:
        return VersionBand.LARGE
    raise UnsupportedVersion(version)


def length_bits(mode: Mode, version: int) -> int:
    """Width in bits of the length field for a data mode at a given version."""
    return LENGTH_BITS[mode][version_band(version)]
