"""
User module data models.

``User`` is the public shape of an account and is the only user model that
ever leaves the service layer. The password hash lives exclusively in
``UserCredentials``, which is used during login and never serialized.
"""

from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from shared.models import BloodGroup, CamelModel, Role
from shared.validators import parse_date


class User(CamelModel):
    """An account as exposed to clients and bound to authenticated requests."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., description="User ID (UUID)")
    name: str
    email: str
    phone: str
    blood_group: BloodGroup
    date_of_birth: date
    city: str
    location: str
    last_donation_date: Optional[date] = None
    role: Role = Role.DONOR
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class UserCredentials(BaseModel):
    """A user together with their stored password hash. Login only."""

    user: User
    password_hash: str

    def __repr__(self) -> str:
        return f"UserCredentials(user_id={self.user.id!r})"


class UserSummary(CamelModel):
    """Reduced user view embedded in admin registration listings."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    blood_group: Optional[BloodGroup] = None
    city: Optional[str] = None


# Mutable through PUT /users/profile; everything else is fixed after signup
PROFILE_LIMITS = {"phone": 20, "city": 100, "location": 255}


class UpdateProfileRequest(CamelModel):
    """Partial profile update. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    phone: Optional[str] = None
    city: Optional[str] = None
    location: Optional[str] = None
    last_donation_date: Optional[date] = None

    @field_validator("phone", "city", "location", mode="before")
    @classmethod
    def non_empty_string(cls, value: Any, info: ValidationInfo) -> str:
        field = info.field_name
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{field} must be a non-empty string")
        value = value.strip()
        if len(value) > PROFILE_LIMITS[field]:
            raise ValueError(f"{field} must be at most {PROFILE_LIMITS[field]} characters")
        return value

    @field_validator("last_donation_date", mode="before")
    @classmethod
    def parse_last_donation_date(cls, value: Any) -> Optional[date]:
        if value is None:
            return None
        return parse_date(value, "lastDonationDate")

    def to_update(self) -> dict[str, Any]:
        """Column/value pairs for the fields actually sent (null included)."""
        update: dict[str, Any] = {}
        for field in self.model_fields_set:
            value = getattr(self, field)
            update[field] = value.isoformat() if isinstance(value, date) else value
        return update


class UserListResponse(BaseModel):
    users: list[User]


class UserResponse(BaseModel):
    user: User


class UpdateProfileResponse(BaseModel):
    message: str
    user: User


class DeleteUserResponse(BaseModel):
    message: str
    user: User
