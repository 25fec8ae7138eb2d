"""
User profile endpoints.
"""

import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.http import HttpRequest
from ninja import Router

from apps.keys.schemas import MessageOut
from apps.keys.store import KeyStore
from core.errors import EmailAlreadyLinked, StoreError, ValidationInputError
from .models import UserProfile
from .schemas import UserSaveIn

logger = logging.getLogger(__name__)

router = Router()


@router.post("/save", response=MessageOut)
def save_user(request: HttpRequest, data: UserSaveIn):
    """Save an end user against an existing API key."""
    if not data.apiKey:
        raise ValidationInputError("Generate an API key first")
    if not data.firstName or not data.email:
        raise ValidationInputError("firstName and email are required")

    record = KeyStore().find_key_by_secret(data.apiKey)
    if record is None:
        raise ValidationInputError("API key not found")

    email = data.email.lower().strip()
    try:
        with transaction.atomic():
            UserProfile.objects.create(
                first_name=data.firstName,
                last_name=data.lastName or "",
                email=email,
                api_key_id=record.id,
            )
    except IntegrityError as e:
        logger.warning(f"[Users] Duplicate user email {email}: {e}")
        raise EmailAlreadyLinked() from e
    except DatabaseError as e:
        logger.exception(f"[Users] Failed to save user {email}: {e}")
        raise StoreError("Failed to save user") from e

    logger.info(f"[Users] Saved {email} for key #{record.id}")
    return MessageOut(message="User saved")
