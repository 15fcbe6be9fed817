"""
tests.integration

Integration test suite for the qrpayload project.

Verifies the decoding service end to end, from HTTP request to the decoder
library and back.
"""
