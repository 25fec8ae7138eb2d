"""
Django Ninja API configuration.
"""

import logging
from typing import Any

from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError
from ninja.renderers import JSONRenderer
from pydantic import ValidationError as PydanticValidationError

from .errors import KeygateError, ValidationInputError

logger = logging.getLogger(__name__)


class SuccessWrapperRenderer(JSONRenderer):
    """Wrap responses in {success: ..., data: ...} unless they already carry a success flag."""

    def render(self, request: HttpRequest, data: Any, *, response_status: int) -> Any:
        if isinstance(data, dict) and "success" in data:
            return super().render(request, data, response_status=response_status)

        if 200 <= response_status < 300:
            wrapped = {"success": True, "data": data}
        else:
            wrapped = {"success": False, "message": data}

        return super().render(request, wrapped, response_status=response_status)


api = NinjaAPI(
    title="Keygate API",
    version="1.0.0",
    description="API key issuing, validation and usage reporting",
    renderer=SuccessWrapperRenderer(),
)


def failure(request: HttpRequest, message: str, status: int) -> HttpResponse:
    return api.create_response(request, {"success": False, "message": message}, status=status)


@api.exception_handler(KeygateError)
def keygate_error_handler(request: HttpRequest, exc: KeygateError) -> HttpResponse:
    if exc.status_code >= 500:
        logger.error(f"[API] {request.method} {request.path} failed: {exc.message}")
    return failure(request, exc.message, exc.status_code)


@api.exception_handler(ValidationError)
def validation_errors(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    logger.debug(f"[API] Rejected body for {request.path}: {exc.errors}")
    return failure(request, ValidationInputError.message, ValidationInputError.status_code)


@api.exception_handler(PydanticValidationError)
def pydantic_validation_errors(request: HttpRequest, exc: PydanticValidationError) -> HttpResponse:
    logger.debug(f"[API] Rejected body for {request.path}: {exc.errors()}")
    return failure(request, ValidationInputError.message, ValidationInputError.status_code)


@api.exception_handler(HttpError)
def http_error_handler(request: HttpRequest, exc: HttpError) -> HttpResponse:
    return failure(request, str(exc), exc.status_code)


@api.exception_handler(Exception)
def generic_error_handler(request: HttpRequest, exc: Exception) -> HttpResponse:
    logger.exception(f"[API] Unhandled error on {request.method} {request.path}: {exc}")
    return failure(request, "Internal server error", 500)


# Health check
@api.get("/health")
def health_check(request: HttpRequest) -> dict:
    return {"status": "ok", "version": "1.0.0"}


# Import and register routers
from apps.keys.api import router as keys_router
from apps.users.api import router as users_router
from apps.admin.api import router as admin_router
from apps.usage.api import router as usage_router

api.add_router("", keys_router, tags=["API Keys"])
api.add_router("/user", users_router, tags=["Users"])
api.add_router("/admin", admin_router, tags=["Admin"])
api.add_router("/admin/keys", usage_router, tags=["Usage"])
