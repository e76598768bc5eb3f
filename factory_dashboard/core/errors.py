from __future__ import annotations

from typing import Any, Optional


class DashboardError(Exception):
    """
    Base class for domain errors raised by services and stores.

    Each subclass carries the HTTP status code and the machine-readable error type
    used by the API exception handlers to build the standard error envelope.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DashboardError):
    """Request payload or merged record violates the entity schema."""

    status_code = 400
    error_type = "validation_error"

    # PUBLIC_INTERFACE
    @classmethod
    def for_field(cls, field: str, cause: str) -> "ValidationError":
        """Build an error describing a single offending field."""
        return cls(f"{field}: {cause}", details=[{"field": field, "message": cause}])


class NotFoundError(DashboardError):
    """Referenced entity id does not exist."""

    status_code = 404
    error_type = "not_found"


class AuthError(DashboardError):
    """Missing or invalid credentials, or no active session."""

    status_code = 401
    error_type = "auth_error"


class InternalError(DashboardError):
    """Storage or backing-service failure."""

    status_code = 500
    error_type = "internal_error"
