"""
Pytest configuration and fixtures.
"""

import json
import pytest
from django.test import Client

from apps.admin.api import hash_password
from apps.admin.models import AdminAccount
from apps.keys.models import ApiKey
from apps.users.models import UserProfile


class APIClient:
    """Wrapper around Django test client for API testing."""

    def __init__(self):
        self.client = Client()

    def _make_request(self, method, path, data=None, headers=None):
        """Make HTTP request."""
        kwargs = {"content_type": "application/json"}

        if headers:
            kwargs.update(headers)

        if data is not None:
            kwargs["data"] = json.dumps(data)

        response = getattr(self.client, method.lower())(path, **kwargs)
        return APIResponse(response)

    def get(self, path, headers=None, **kwargs):
        return self._make_request("GET", path, headers=headers)

    def post(self, path, json=None, headers=None, **kwargs):
        return self._make_request("POST", path, data=json, headers=headers)


class APIResponse:
    """Wrapper around Django response for easier testing."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    def json(self):
        return json.loads(self._response.content)


@pytest.fixture
def api_client():
    """API test client."""
    return APIClient()


@pytest.fixture
def api_key(db):
    """An issued key."""
    return ApiKey.objects.create(key="sk-test-key-0001")


@pytest.fixture
def other_api_key(db):
    return ApiKey.objects.create(key="sk-test-key-0002")


@pytest.fixture
def user_profile(api_key):
    """End user attached to api_key."""
    return UserProfile.objects.create(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@test.com",
        api_key=api_key,
    )


@pytest.fixture
def admin_account(db):
    """Admin with a known password."""
    return AdminAccount.objects.create(
        email="admin@test.com",
        password_hash=hash_password("Admin@123456"),
    )
