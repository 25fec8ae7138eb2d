"""
Admin account model - credentials for the dashboard.
"""

from django.db import models


class AdminAccount(models.Model):
    """Admin credentials. Only a bcrypt hash of the password is stored."""

    id = models.BigAutoField(primary_key=True)
    email = models.EmailField(unique=True)
    password_hash = models.CharField(max_length=255)

    class Meta:
        db_table = "admin"

    def __str__(self) -> str:
        return self.email
