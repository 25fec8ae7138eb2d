"""
Usage log model - append-only record of successful key validations.
"""

from django.db import models
from django.utils import timezone

from apps.keys.models import ApiKey


class UsageEvent(models.Model):
    """One successful validation of an API key."""

    id = models.BigAutoField(primary_key=True)
    api_key = models.ForeignKey(ApiKey, on_delete=models.CASCADE, related_name="usage_events")
    checked_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "api_usage_log"
        ordering = ["-checked_at"]
        indexes = [models.Index(fields=["api_key", "checked_at"], name="usage_key_checked_idx")]

    def __str__(self) -> str:
        return f"key #{self.api_key_id} @ {self.checked_at.isoformat()}"
