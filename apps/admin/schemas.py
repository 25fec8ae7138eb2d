"""
Admin schemas for API.
"""

from ninja import Schema


class AdminCredentialsIn(Schema):
    email: str | None = None
    password: str | None = None


class DashboardRowOut(Schema):
    """One user/key pair with its liveness status."""

    firstName: str
    lastName: str
    email: str
    key: str
    status: str


class DashboardOut(Schema):
    success: bool = True
    data: list[DashboardRowOut]
