"""
Tracking models for issued identifiers.

An entry is created once on registration and only ever mutated by
deactivation (active -> inactive).
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..utils.datetime import utc_now


class IDTrackingEntry(BaseModel):
    """Why and when an identifier was issued, and whether it is still active."""

    model_config = {"from_attributes": True}

    id: str = Field(..., description="Tracked identifier (registry key)")
    created_at: datetime = Field(
        default_factory=utc_now,
        description="Registration timestamp"
    )
    purpose: str = Field(..., description="Free-text label for why the ID was issued")
    associated_data: Optional[Any] = Field(None, description="Opaque caller payload")
    is_active: bool = Field(True, description="False once the ID has been deactivated")
