"""
Exception handlers for the NinjaAPI instance.

Every error response has the same shape as ninja's own HttpError responses:
{"detail": "<message>"}.
"""
import logging

from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja import NinjaAPI

from .exceptions import ServiceError

logger = logging.getLogger(__name__)


def validation_message(exc: ValidationError) -> str:
    """First human-readable message of a ValidationError."""
    messages = exc.messages
    return messages[0] if messages else "Invalid input."


def setup_exception_handlers(api: NinjaAPI) -> None:
    """Register service-error handlers on the API."""

    @api.exception_handler(ValidationError)
    def handle_validation_error(request: HttpRequest, exc: ValidationError):
        return api.create_response(request, {"detail": validation_message(exc)}, status=400)

    @api.exception_handler(ServiceError)
    def handle_service_error(request: HttpRequest, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"Service error in {request.method} {request.path}: {exc.message}")
        return api.create_response(request, {"detail": exc.message}, status=exc.status_code)

    @api.exception_handler(Exception)
    def handle_unexpected_error(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled exception in {request.method} {request.path}: {exc}")
        return api.create_response(
            request,
            {"detail": "Something went wrong. Please try again."},
            status=500,
        )
