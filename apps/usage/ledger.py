"""
Usage ledger - append-only log of API key validations.
"""

import logging
from datetime import datetime

from django.db import DatabaseError, transaction
from django.utils import timezone

from core.errors import StoreError
from .models import UsageEvent

logger = logging.getLogger(__name__)


class UsageLedger:
    """Django-backed usage ledger. Events are only ever inserted."""

    def append(self, key_id: int, checked_at: datetime | None = None) -> int:
        """Record one validation of key_id and return the event id."""
        try:
            with transaction.atomic():
                event = UsageEvent.objects.create(
                    api_key_id=key_id,
                    checked_at=checked_at or timezone.now(),
                )
        except DatabaseError as e:
            raise StoreError() from e
        return event.id

    def count_for(self, key_id: int) -> int:
        try:
            return UsageEvent.objects.filter(api_key_id=key_id).count()
        except DatabaseError as e:
            logger.exception(f"[UsageLedger] Failed to count events: {e}")
            raise StoreError() from e

    def has_event_since(self, key_id: int, since: datetime) -> bool:
        """True if key_id has an event at or after `since`."""
        try:
            return UsageEvent.objects.filter(api_key_id=key_id, checked_at__gte=since).exists()
        except DatabaseError as e:
            logger.exception(f"[UsageLedger] Failed to query events: {e}")
            raise StoreError() from e

    def events_for(self, key_id: int, limit: int = 50) -> list[UsageEvent]:
        """Most recent events for key_id, newest first."""
        try:
            return list(UsageEvent.objects.filter(api_key_id=key_id).order_by("-checked_at")[: max(limit, 0)])
        except DatabaseError as e:
            logger.exception(f"[UsageLedger] Failed to list events: {e}")
            raise StoreError() from e
