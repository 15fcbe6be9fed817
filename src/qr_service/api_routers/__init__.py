"""
api_routers

FastAPI routers for the qrpayload service.

Modules:
    - decode: Payload decoding and format table endpoints
    - status: Health, status and metrics endpoints
"""
