"""
Base exception classes for the DonorHub backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps them to HTTP responses through ``status_code``.
"""

from typing import Optional, Any


class DonorHubError(Exception):
    """
    Base exception for all DonorHub errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the public response body."""
        return {"message": self.message}


class ValidationError(DonorHubError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(DonorHubError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(DonorHubError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(DonorHubError):
    """Resource not found."""

    status_code = 404


class ConflictError(DonorHubError):
    """Request conflicts with existing state (uniqueness violations)."""

    status_code = 409


class DuplicateKeyError(DonorHubError):
    """
    A write violated a storage-level uniqueness constraint.

    Raised by repositories; services decide which ConflictError it becomes.
    """

    def __init__(self, constraint: Optional[str] = None):
        super().__init__(
            f"Duplicate key violates unique constraint: {constraint or 'unknown'}",
            code="DUPLICATE_KEY",
            details={"constraint": constraint},
        )
        self.constraint = constraint


class ConfigurationError(DonorHubError):
    """Required configuration is missing or invalid. Fatal at startup."""

    pass
