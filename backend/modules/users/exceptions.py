"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class EmptyProfileUpdateError(ValidationError):
    """Raised when a profile update carries no fields."""

    def __init__(self):
        super().__init__(
            "At least one updatable field is required",
            code="EMPTY_UPDATE",
        )
