"""
Core domain models for MagasiID.

Exports the Pydantic models for identifier configuration and tracking.
"""
from .id_config import IDConfiguration
from .tracking import IDTrackingEntry

__all__ = [
    "IDConfiguration",
    "IDTrackingEntry",
]
