"""
User profile model - an end user attached to exactly one API key.
"""

from django.db import models

from apps.keys.models import ApiKey


class UserProfile(models.Model):
    """End user registered against an issued key."""

    id = models.BigAutoField(primary_key=True)
    first_name = models.CharField(max_length=255, db_column="firstName")
    last_name = models.CharField(max_length=255, blank=True, default="", db_column="lastName")
    email = models.EmailField(unique=True)
    api_key = models.ForeignKey(ApiKey, on_delete=models.CASCADE, related_name="users")

    class Meta:
        db_table = "user"

    def __str__(self) -> str:
        return self.email
