"""
common

This package contains shared models used across the qrpayload project.

Modules:
    - models: Defines shared Pydantic models used by multiple components
"""

from .models import Segment

__all__ = ["Segment"]
