"""
qr_decoder.errors

Exception hierarchy for QR payload decoding.

Every failure aborts the whole decode; callers catch DecodeError to handle
all of them at once, or one of the subclasses to react to a specific cause.

Classes:
    - DecodeError: Base class for all payload decoding failures
    - UnsupportedVersion: Symbol version outside 1-40
    - InsufficientBits: The stream ended before a field could be read
    - UnsupportedMode: A mode tag this decoder does not implement
    - InvalidAlphanumericValue: An alphanumeric symbol index above 44
"""


class DecodeError(Exception):
    """Base error for all payload decoding operations."""

    pass


class UnsupportedVersion(DecodeError):
    """Raised when a segment decoder is given a version outside 1-40."""

    def __init__(self, version: int):
        self.version = version
        super().__init__(f"Unknown version {version}")


class InsufficientBits(DecodeError):
    """Raised when fewer bits remain in the stream than a field needs."""

    def __init__(self, bits: int, what: str = "data"):
        self.bits = bits
        self.what = what
        super().__init__(f"Could not read {bits} bits for {what}")


class UnsupportedMode(DecodeError):
    """Raised for a 4-bit mode tag outside numeric/alphanumeric/byte/terminator."""

    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"Mode {tag:04b} not supported")


class InvalidAlphanumericValue(DecodeError):
    """Raised when a decoded alphanumeric symbol index does not exist in the alphabet."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid character in alphanumeric data {value}")
