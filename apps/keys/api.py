"""
API key endpoints - issue new keys and check presented ones.
"""

from django.http import HttpRequest
from ninja import Router

from core.errors import ValidationInputError
from .schemas import ApiKeyCheckIn, ApiKeyCreateOut, MessageOut
from .services import default_service

router = Router()


@router.post("/create", response=ApiKeyCreateOut)
def create_key(request: HttpRequest):
    """Generate a new API key and store it."""
    api_key = default_service().generate()
    return ApiKeyCreateOut(apiKey=api_key, message="API key generated and saved")


@router.post("/cekapi", response=MessageOut)
def check_key(request: HttpRequest, data: ApiKeyCheckIn):
    """Validate an API key, recording usage when it is known."""
    if not data.apiKey:
        raise ValidationInputError("apiKey is required in the request body")

    default_service().validate(data.apiKey)
    return MessageOut(message="API key is valid")
