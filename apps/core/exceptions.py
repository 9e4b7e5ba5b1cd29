"""
Service-layer errors.

Services raise these (or django's ValidationError for bad form input) and the
API layer turns them into JSON error responses, see apps.core.api_errors.
"""


class ServiceError(Exception):
    """Base class for expected failures that carry a user-facing message."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = 404


class ForbiddenError(ServiceError):
    status_code = 403


class ConflictError(ServiceError):
    status_code = 409
