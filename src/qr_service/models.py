"""
Defines Pydantic models for API request/response validation and serialization.

Models:
    - DecodeRequest: Codeword stream (hex) and symbol version to decode
    - SegmentModel: One decoded segment as returned by the API
    - DecodeResponse: Decoded payload and its segments
    - DecodeErrorResponse: Error type and message of a failed decode
    - AlphabetInfo: Alphanumeric alphabet and length-field width table
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from common.models import Segment


class DecodeRequest(BaseModel):
    """A codeword stream to decode, as produced by error correction."""

    payload: str = Field(
        ..., description="Codeword stream as hexadecimal; whitespace is ignored."
    )
    version: int = Field(..., description="Symbol version (1–40).")

    @field_validator("payload")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return "".join(value.split())


class SegmentModel(BaseModel):
    """A decoded segment with its content rendered as hex."""

    mode: str
    char_count: int
    start_bit: int
    end_bit: int
    data_hex: str

    @classmethod
    def from_segment(cls, segment: Segment) -> "SegmentModel":
        return cls(
            mode=segment.mode,
            char_count=segment.char_count,
            start_bit=segment.start_bit,
            end_bit=segment.end_bit,
            data_hex=segment.data.hex(),
        )


class DecodeResponse(BaseModel):
    """Result of a successful decode."""

    version: int
    data_hex: str
    data_base64: str
    text: Optional[str] = Field(
        None, description="Payload as UTF-8, or null if the bytes are not valid UTF-8."
    )
    segments: List[SegmentModel] = Field(default_factory=list)


class DecodeErrorResponse(BaseModel):
    """Describes why a decode failed."""

    error: str = Field(..., description="Name of the decode error type.")
    detail: str


class AlphabetInfo(BaseModel):
    """Fixed tables of the payload format."""

    alphanumeric: str
    length_bits: Dict[str, Dict[str, int]]
