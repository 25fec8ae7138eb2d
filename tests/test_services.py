"""
Tests for the key lifecycle service, run against in-memory fakes.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from apps.keys.services import KeyLifecycleService, Valid, draw_secret
from core.errors import GenerationConflict, InvalidKey
from tests.fakes import FailingUsageLedger, FakeKeyStore, FakeUsageLedger


@pytest.fixture
def store():
    return FakeKeyStore()


@pytest.fixture
def ledger():
    return FakeUsageLedger()


@pytest.fixture
def service(store, ledger):
    return KeyLifecycleService(store, ledger)


class TestDrawSecret:
    """Secret format."""

    def test_prefix_and_alphabet(self):
        secret = draw_secret()
        assert secret.startswith("sk-")
        body = secret[len("sk-"):]
        # 24 random bytes encode to 32 URL-safe base64 characters, no padding
        assert len(body) == 32
        assert all(c.isalnum() or c in "-_" for c in body)

    def test_distinct_draws(self):
        secrets = {draw_secret() for _ in range(10_000)}
        assert len(secrets) == 10_000


class TestGenerate:
    """Key generation."""

    def test_returns_persisted_secret(self, service, store):
        secret = service.generate()
        record = store.find_key_by_secret(secret)
        assert record is not None
        assert record.secret == secret

    def test_sequential_secrets_unique(self, service):
        secrets = [service.generate() for _ in range(10_000)]
        assert len(set(secrets)) == len(secrets)

    def test_concurrent_secrets_unique(self, service, store):
        with ThreadPoolExecutor(max_workers=16) as pool:
            secrets = list(pool.map(lambda _: service.generate(), range(2_000)))
        assert len(set(secrets)) == 2_000
        assert store.insert_calls == 2_000

    def test_collision_raises_generation_conflict(self, service, store):
        store.insert_key("sk-fixed")
        with patch("apps.keys.services.draw_secret", return_value="sk-fixed"):
            with pytest.raises(GenerationConflict):
                service.generate()

    def test_retry_after_conflict_draws_new_secret(self, service, store):
        store.insert_key("sk-fixed")
        with patch("apps.keys.services.draw_secret", side_effect=["sk-fixed", "sk-fresh"]):
            with pytest.raises(GenerationConflict):
                service.generate()
            assert service.generate() == "sk-fresh"


class TestValidate:
    """Key validation and usage recording."""

    def test_valid_key(self, service, store):
        secret = service.generate()
        result = service.validate(secret)
        assert result == Valid(key_id=store.find_key_by_secret(secret).id)

    def test_unknown_key_has_no_side_effect(self, service, ledger):
        service.generate()
        with pytest.raises(InvalidKey):
            service.validate("sk-doesnotexist")
        assert ledger.events == []

    def test_near_miss_is_invalid(self, service):
        secret = service.generate()
        for candidate in (secret[:-1], secret + "x", secret.upper(), " " + secret, ""):
            with pytest.raises(InvalidKey):
                service.validate(candidate)

    def test_each_validation_adds_one_event(self, service, ledger):
        secret = service.generate()
        key_id = service.validate(secret).key_id
        assert ledger.count_for(key_id) == 1

        service.validate(secret)
        service.validate(secret)
        assert ledger.count_for(key_id) == 3

    def test_concurrent_validations_each_recorded(self, service, ledger):
        secret = service.generate()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: service.validate(secret), range(100)))
        assert len({r.key_id for r in results}) == 1
        assert ledger.count_for(results[0].key_id) == 100

    def test_ledger_failure_does_not_fail_validation(self, store):
        service = KeyLifecycleService(store, FailingUsageLedger())
        secret = service.generate()
        result = service.validate(secret)
        assert isinstance(result, Valid)
