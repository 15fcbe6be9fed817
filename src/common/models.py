"""
common.models

Shared Pydantic models for use across qrpayload modules.

Segment:
    One decoded payload segment: its mode, the value of its length field, the
    decoded content and the bit offsets it spans in the codeword stream.
"""

from pydantic import BaseModel, Field


class Segment(BaseModel):
    """
    Segment

    Represents one mode-tagged run of a QR payload after decoding.

    Attributes:
        mode (str): Mode name ('NUMERIC', 'ALPHANUMERIC' or 'BYTE').
        char_count (int): Value of the segment's length field (digits, characters or bytes).
        data (bytes): Decoded content. Digits and alphanumeric symbols are ASCII.
        start_bit (int): Cursor offset of the segment's mode tag.
        end_bit (int): Cursor offset just past the segment's last field.
    """

    mode: str
    char_count: int = Field(..., ge=0)
    data: bytes
    start_bit: int = Field(..., ge=0)
    end_bit: int = Field(..., ge=0)

    @property
    def bit_length(self) -> int:
        """Number of bits the segment occupies, mode tag included."""
        return self.end_bit - self.start_bit
