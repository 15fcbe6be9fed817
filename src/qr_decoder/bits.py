"""
qr_decoder.bits

Sequential bit-level reader over an immutable byte buffer.

QR payload fields are packed MSB first with no byte alignment, so every
segment decoder pulls its fields through a BitCursor.
"""

from .errors import InsufficientBits

MAX_READ_BITS = 16


class BitCursor:
    """
    Reads unsigned integers of 1-16 bits from a byte buffer, most significant bit first.

    The offset only moves forward. A read either advances it by exactly the
    requested count or, when too few bits remain, returns None and leaves it
    where it was.

    Usage:
        cursor = BitCursor(b"\\x10\\x0c")
        mode = cursor.read_u8(4)      # 0b0001
        length = cursor.read_u16(10)  # 3
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bits consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bits left before the end of the buffer."""
        return len(self._data) * 8 - self._offset

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def read(self, n: int) -> int | None:
        """
        Return the next n bits as an unsigned integer, or None if fewer than n remain.

        Args:
            n: Number of bits to read, 1 to 16.

        Raises:
            ValueError: if n is outside 1-16.
        """
        if not 1 <= n <= MAX_READ_BITS:
            raise ValueError(f"Bit count must be between 1 and {MAX_READ_BITS}, got {n}")
        if n > self.remaining:
            return None

        value = 0
        offset = self._offset
        for _ in range(n):
            byte = self._data[offset >> 3]
            bit = (byte >> (7 - (offset & 7))) & 1
            value = (value << 1) | bit
            offset += 1

        self._offset = offset
        return value

    def read_u8(self, n: int) -> int | None:
        """Read up to 8 bits; used for mode tags and byte-mode octets."""
        if n > 8:
            raise ValueError(f"read_u8 supports at most 8 bits, got {n}")
        return self.read(n)

    def read_u16(self, n: int) -> int | None:
        """Read up to 16 bits; used for length fields and grouped character values."""
        return self.read(n)

    def read_or_raise(self, n: int, what: str = "data") -> int:
        """
        Read n bits, raising InsufficientBits instead of returning None.

        Args:
            n: Number of bits to read.
            what: Name of the field, used in the error message.
        """
        value = self.read_u16(n)
        if value is None:
            raise InsufficientBits(n, what)
        return value

    def __repr__(self) -> str:
        return f"BitCursor(offset={self._offset}, remaining={self.remaining})"
