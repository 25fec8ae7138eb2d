"""
Tests for user profile endpoints.
"""

import pytest

from apps.users.models import UserProfile


@pytest.mark.django_db
class TestSaveUserAPI:
    """POST /user/save."""

    def test_save_user(self, api_client, api_key):
        response = api_client.post(
            "/user/save",
            json={
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@test.com",
                "apiKey": api_key.key,
            },
        )
        assert response.status_code == 200
        assert response.json()["success"] is True

        profile = UserProfile.objects.get(email="ada@test.com")
        assert profile.api_key_id == api_key.id
        assert profile.first_name == "Ada"

    def test_missing_api_key(self, api_client):
        response = api_client.post(
            "/user/save",
            json={"firstName": "Ada", "lastName": "Lovelace", "email": "ada@test.com"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_unknown_api_key(self, api_client, db):
        response = api_client.post(
            "/user/save",
            json={"firstName": "Ada", "email": "ada@test.com", "apiKey": "sk-nope"},
        )
        assert response.status_code == 400
        assert not UserProfile.objects.exists()

    def test_duplicate_email(self, api_client, user_profile, other_api_key):
        response = api_client.post(
            "/user/save",
            json={"firstName": "Other", "email": user_profile.email, "apiKey": other_api_key.key},
        )
        assert response.status_code == 500
        assert UserProfile.objects.count() == 1

    def test_generated_key_flow(self, api_client):
        secret = api_client.post("/create").json()["apiKey"]
        response = api_client.post(
            "/user/save",
            json={"firstName": "Linus", "lastName": "T", "email": "linus@test.com", "apiKey": secret},
        )
        assert response.status_code == 200

        dashboard = api_client.get("/admin/dashboard").json()["data"]
        assert dashboard[0]["key"] == secret
        assert dashboard[0]["status"] == "offline"
