"""
tests

Test suite for the qrpayload project.

Top-level modules test the qr_decoder library and the shared common models.

Subpackages:
    - qr_service: Tests for the FastAPI decoding service
    - integration: End-to-end tests through the full application
"""
