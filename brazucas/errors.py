"""Typed service errors.

Services raise these; the HTTP layer (``brazucas.main``) maps them to status
codes and the ``{success: false, error}`` envelope. ``code`` is a short
machine-readable tag in the style of ``content_not_found``.
"""
from typing import Optional


class ServiceError(Exception):
    """Base class for expected, user-facing failures."""

    status_code: int = 500
    default_code: str = "service_error"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class NotFoundError(ServiceError):
    status_code = 404
    default_code = "not_found"


class ForbiddenError(ServiceError):
    status_code = 403
    default_code = "forbidden"


class AuthenticationError(ServiceError):
    status_code = 401
    default_code = "unauthenticated"


class ValidationError(ServiceError):
    """Malformed input that got past schema validation."""

    status_code = 400
    default_code = "invalid_input"


class ConflictError(ServiceError):
    status_code = 409
    default_code = "conflict"
