"""
User profile schemas for API.
"""

from ninja import Schema


class UserSaveIn(Schema):
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    apiKey: str | None = None
