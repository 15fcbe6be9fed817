"""
Integration tests for the qrpayload service.

These tests send HTTP requests through the full application built by
`create_app`, from the routers down to the decoding library.
"""


def test_healthz_endpoint(client):
    """Test /api/healthz endpoint for API responsiveness and expected status."""
    response = client.get("/api/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_mixed_segment_payload(client):
    """Numeric "123", alphanumeric "AB" and byte "!" in one stream, version 1."""
    # 0001 0000000011 0001111011 | 0010 000000010 00111001101 | 0100 00000001 00100001 | 0000
    bits = (
        "0001" "0000000011" "0001111011"
        "0010" "000000010" "00111001101"
        "0100" "00000001" "00100001"
        "0000"
    )
    bits += "0" * (-len(bits) % 8)
    payload = int(bits, 2).to_bytes(len(bits) // 8, "big").hex()

    response = client.post("/api/decode", json={"payload": payload, "version": 1})
    assert response.status_code == 200
    body = response.json()
    assert body["text"] == "123AB!"
    assert [s["mode"] for s in body["segments"]] == ["NUMERIC", "ALPHANUMERIC", "BYTE"]
