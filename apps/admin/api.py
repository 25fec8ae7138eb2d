"""
Admin API endpoints - account registration, login and the key dashboard.
"""

import logging

import bcrypt
from django.db import DatabaseError, IntegrityError, transaction
from django.http import HttpRequest
from ninja import Router

from apps.keys.schemas import MessageOut
from apps.usage.ledger import UsageLedger
from apps.usage.liveness import LivenessEvaluator
from core.errors import (
    EmailAlreadyRegistered,
    InvalidCredentials,
    StoreError,
    ValidationInputError,
)
from .models import AdminAccount
from .schemas import AdminCredentialsIn, DashboardOut, DashboardRowOut

logger = logging.getLogger(__name__)

router = Router()


# bcrypt only accepts passwords up to 72 bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Over-long passwords never match."""
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password.encode(), hashed.encode())


def read_credentials(data: AdminCredentialsIn) -> tuple[str, str]:
    if not data.email or not data.password:
        raise ValidationInputError("Email and password are required")
    return data.email.lower().strip(), data.password


@router.post("/register", response=MessageOut)
def register(request: HttpRequest, data: AdminCredentialsIn):
    """Register a new admin account."""
    email, password = read_credentials(data)
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValidationInputError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    try:
        with transaction.atomic():
            AdminAccount.objects.create(email=email, password_hash=hash_password(password))
    except IntegrityError as e:
        logger.info(f"[Admin] Registration refused, {email} already exists")
        raise EmailAlreadyRegistered() from e
    except DatabaseError as e:
        logger.exception(f"[Admin] Failed to register {email}: {e}")
        raise StoreError("Failed to register admin") from e

    logger.info(f"[Admin] Registered {email}")
    return MessageOut(message="Admin registered")


@router.post("/login", response=MessageOut)
def login(request: HttpRequest, data: AdminCredentialsIn):
    """Check admin credentials. No session or token is issued."""
    email, password = read_credentials(data)

    try:
        admin = AdminAccount.objects.filter(email=email).first()
    except DatabaseError as e:
        logger.exception(f"[Admin] Failed to load {email}: {e}")
        raise StoreError() from e

    # Same error for unknown email and wrong password
    if not admin or not verify_password(password, admin.password_hash):
        logger.info(f"[Admin] Failed login for {email}")
        raise InvalidCredentials()

    logger.info(f"[Admin] Login for {email}")
    return MessageOut(message="Login successful")


@router.get("/dashboard", response=DashboardOut)
def dashboard(request: HttpRequest):
    """List every user with their key and its online/offline status."""
    rows = LivenessEvaluator(UsageLedger()).report()
    return DashboardOut(
        data=[
            DashboardRowOut(
                firstName=row.first_name,
                lastName=row.last_name,
                email=row.email,
                key=row.key,
                status=row.status,
            )
            for row in rows
        ]
    )
