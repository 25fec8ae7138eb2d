"""
API key schemas for API.
"""

from ninja import Schema


class ApiKeyCheckIn(Schema):
    apiKey: str | None = None


class ApiKeyCreateOut(Schema):
    success: bool = True
    apiKey: str  # Full key, only returned once
    message: str


class MessageOut(Schema):
    success: bool = True
    message: str
