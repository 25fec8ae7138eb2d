"""
Usage schemas for API.
"""

from datetime import datetime

from ninja import Schema
from pydantic import ConfigDict, Field


class UsageEventOut(Schema):
    """Usage event output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    checkedAt: datetime = Field(validation_alias="checked_at")


class KeyUsageOut(Schema):
    success: bool = True
    keyId: int
    status: str
    usageCount: int
    recentUsage: list[UsageEventOut]
