"""
Liveness evaluation - derives online/offline per key from the usage ledger.

A key is online when it has at least one usage event inside the trailing
window (inclusive at the lower bound). The key's own creation time is never
considered. Nothing is cached; every call reads the ledger.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from django.conf import settings
from django.db import DatabaseError
from django.db.models import Exists, OuterRef
from django.utils import timezone

from apps.users.models import UserProfile
from core.errors import StoreError
from .ledger import UsageLedger
from .models import UsageEvent

logger = logging.getLogger(__name__)


class KeyStatus:
    ONLINE = "online"
    OFFLINE = "offline"


def liveness_window() -> timedelta:
    return timedelta(days=settings.LIVENESS_WINDOW_DAYS)


@dataclass(frozen=True)
class StatusRow:
    """One dashboard line: a user profile, its key and the key's status."""

    first_name: str
    last_name: str
    email: str
    key: str
    status: str


class LivenessEvaluator:
    def __init__(self, ledger: UsageLedger, window: timedelta | None = None):
        self.ledger = ledger
        self.window = window if window is not None else liveness_window()

    def window_start(self, as_of: datetime | None = None) -> datetime:
        return (as_of or timezone.now()) - self.window

    def status_of(self, key_id: int, as_of: datetime | None = None) -> str:
        """Return KeyStatus.ONLINE or KeyStatus.OFFLINE for key_id."""
        if self.ledger.has_event_since(key_id, self.window_start(as_of)):
            return KeyStatus.ONLINE
        return KeyStatus.OFFLINE

    def report(self, as_of: datetime | None = None) -> list[StatusRow]:
        """Status of every user profile's key, computed in one query."""
        since = self.window_start(as_of)
        recent_usage = UsageEvent.objects.filter(
            api_key_id=OuterRef("api_key_id"),
            checked_at__gte=since,
        )
        queryset = (
            UserProfile.objects.select_related("api_key")
            .annotate(is_online=Exists(recent_usage))
            .order_by("id")
        )

        try:
            profiles = list(queryset)
        except DatabaseError as e:
            logger.exception(f"[Liveness] Failed to build status report: {e}")
            raise StoreError() from e

        return [
            StatusRow(
                first_name=profile.first_name,
                last_name=profile.last_name,
                email=profile.email,
                key=profile.api_key.key,
                status=KeyStatus.ONLINE if profile.is_online else KeyStatus.OFFLINE,
            )
            for profile in profiles
        ]
