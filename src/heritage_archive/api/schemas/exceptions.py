"""
Exception classes for API error handling.

Every error response uses one envelope:
``{"error": {"type": ..., "message": ..., "detail" | "fields": ...}}``.
"""

from typing import Any


class APIException(Exception):
    """
    Base exception for API errors.

    Raise from a route; the application's handler turns it into the
    error envelope with ``status_code``.
    """

    status_code: int = 500
    error_type: str = "api_error"
    message: str = "An error occurred"

    def __init__(self, message: str | None = None, detail: str | None = None) -> None:
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)

    def to_content(self) -> dict[str, Any]:
        """JSON body for this error."""
        return {"error": {"type": self.error_type, "message": self.message, "detail": self.detail}}


class ValidationError(APIException):
    """Request data rejected, with one message per offending field."""

    status_code = 400
    error_type = "validation_error"
    message = "Request validation failed"

    def __init__(self, fields: dict[str, str]) -> None:
        self.fields = fields
        super().__init__()

    def to_content(self) -> dict[str, Any]:
        return {"error": {"type": self.error_type, "message": self.message, "fields": self.fields}}


class NotFoundError(APIException):
    """No artifact (or other resource) with the requested id."""

    status_code = 404
    error_type = "not_found"
    message = "Resource not found"


class AuthRequiredError(APIException):
    """Admin-only endpoint called without a valid admin token."""

    status_code = 401
    error_type = "authentication_required"
    message = "Authentication required"


class InvalidCredentialsError(APIException):
    status_code = 401
    error_type = "invalid_credentials"
    message = "Invalid email or password"


class InternalError(APIException):
    """Server-side failure; carries a generic message, never store details."""

    status_code = 500
    error_type = "internal_error"
    message = "Internal server error"
