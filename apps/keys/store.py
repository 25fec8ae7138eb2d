"""
Key store - write-once, read-many persistence for issued API keys.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from django.db import DatabaseError, IntegrityError, transaction

from core.errors import ConflictError, StoreError
from .models import ApiKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyRecord:
    """Stored API key."""

    id: int
    secret: str
    created_at: datetime


class KeyStore:
    """Django-backed key store.

    Only inserts and exact-match lookups are exposed. Uniqueness of the
    secret is enforced by the database constraint, not in Python.
    """

    def insert_key(self, secret: str) -> int:
        """Persist a new secret and return its id.

        Raises ConflictError if the secret already exists, StoreError on
        any other database failure.
        """
        try:
            # Savepoint so a constraint violation leaves the outer transaction usable
            with transaction.atomic():
                api_key = ApiKey.objects.create(key=secret)
        except IntegrityError as e:
            logger.warning(f"[KeyStore] Duplicate secret rejected: {e}")
            raise ConflictError() from e
        except DatabaseError as e:
            logger.exception(f"[KeyStore] Failed to insert key: {e}")
            raise StoreError() from e
        return api_key.id

    def find_key_by_secret(self, secret: str) -> KeyRecord | None:
        """Look up a key by its exact secret. Returns None on miss."""
        try:
            api_key = ApiKey.objects.filter(key=secret).first()
        except DatabaseError as e:
            logger.exception(f"[KeyStore] Failed to look up key: {e}")
            raise StoreError() from e

        if api_key is None:
            return None
        return KeyRecord(id=api_key.id, secret=api_key.key, created_at=api_key.created_at)
