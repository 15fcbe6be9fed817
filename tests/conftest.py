import pytest
from fastapi.testclient import TestClient

from qr_service.main import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    Synchronous TestClient fixture for FastAPI.
    Use this for standard API endpoint testing.
    """
    with TestClient(app=app, base_url="http://test") as c:
        yield c


def pack_bits(*fields) -> bytes:
    """
    Build a codeword stream from bit fields.

    Each field is either a string of '0'/'1' characters (spaces allowed) or a
    (value, width) tuple. The result is zero-padded to a whole number of bytes.
    """
    bit_string = ""
    for field in fields:
        if isinstance(field, tuple):
            value, width = field
            bit_string += f"{value:0{width}b}"
        else:
            bit_string += field.replace(" ", "")
    bit_string += "0" * (-len(bit_string) % 8)
    return int(bit_string, 2).to_bytes(len(bit_string) // 8, "big") if bit_string else b""


@pytest.fixture
def bits():
    """Provides the pack_bits helper to tests."""
    return pack_bits
