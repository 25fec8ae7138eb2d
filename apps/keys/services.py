"""
Key lifecycle - generation and validation of API keys.
"""

import logging
import secrets
from dataclasses import dataclass

from django.conf import settings

from apps.usage.ledger import UsageLedger
from core.errors import ConflictError, GenerationConflict, InvalidKey, KeygateError
from .store import KeyStore

logger = logging.getLogger(__name__)


def draw_secret() -> str:
    """Fresh secret: fixed prefix + URL-safe encoding of random bytes."""
    return settings.API_KEY_PREFIX + secrets.token_urlsafe(settings.API_KEY_BYTES)


@dataclass(frozen=True)
class Valid:
    """Successful validation of a known key."""

    key_id: int


class KeyLifecycleService:
    """Issues keys and validates them, recording usage on each hit.

    The store and ledger are injected so tests can substitute fakes.
    """

    def __init__(self, store: KeyStore, ledger: UsageLedger):
        self.store = store
        self.ledger = ledger

    def generate(self) -> str:
        """Create and persist a new key, returning the plaintext secret.

        Raises GenerationConflict if the drawn secret collides with an
        existing one. Retrying draws new randomness.
        """
        secret = draw_secret()
        try:
            key_id = self.store.insert_key(secret)
        except ConflictError as e:
            logger.error("[Keys] Generated secret collided with an existing key")
            raise GenerationConflict() from e

        logger.info(f"[Keys] Generated key #{key_id} ({secret[:8]}...)")
        return secret

    def validate(self, secret: str) -> Valid:
        """Check secret against the store.

        Unknown secrets raise InvalidKey and leave the ledger untouched.
        Known secrets get one usage event; if that write fails the result
        is still Valid.
        """
        record = self.store.find_key_by_secret(secret)
        if record is None:
            logger.info("[Keys] Rejected unknown API key")
            raise InvalidKey()

        result = Valid(key_id=record.id)
        self._record_usage(record.id)
        return result

    def _record_usage(self, key_id: int) -> None:
        try:
            self.ledger.append(key_id)
        except KeygateError as e:
            logger.exception(f"[Keys] Usage event for key #{key_id} was not recorded: {e}")


def default_service() -> KeyLifecycleService:
    return KeyLifecycleService(KeyStore(), UsageLedger())
