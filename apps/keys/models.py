"""
API key model - one row per issued key, never updated or deleted.
"""

from django.db import models


class ApiKey(models.Model):
    """Issued API key. The secret is the bearer credential itself."""

    id = models.BigAutoField(primary_key=True)
    key = models.CharField(max_length=128, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "api_keys"

    def __str__(self) -> str:
        return f"{self.key[:8]}... (#{self.id})"
