"""
Authentication module data models.

Request bodies for signup and login, and the responses that carry a
freshly issued token.
"""

from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from shared.models import BloodGroup, CamelModel, Role
from shared.validators import age_on, is_valid_email, normalize_email, parse_date
from modules.users.models import User


MINIMUM_DONOR_AGE = 18
MINIMUM_PASSWORD_LENGTH = 8
REQUIRED_SIGNUP_FIELDS = (
    "name", "email", "password", "phone", "blood_group", "date_of_birth", "city", "location",
)


class SignupRequest(CamelModel):
    """New donor account. Role is not accepted here; it is always donor."""

    name: str = Field(..., min_length=2, max_length=100)
    email: str
    password: str
    phone: str = Field(..., max_length=20)
    blood_group: BloodGroup
    date_of_birth: date
    city: str = Field(..., max_length=100)
    location: str = Field(..., max_length=255)
    last_donation_date: Optional[date] = None

    @model_validator(mode="before")
    @classmethod
    def required_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for field in REQUIRED_SIGNUP_FIELDS:
                value = data.get(to_camel(field), data.get(field))
                if value is None or (isinstance(value, str) and not value.strip()):
                    raise ValueError("All required fields must be provided")
        return data

    @field_validator("name", "phone", "city", "location", mode="before")
    @classmethod
    def strip_required(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("All required fields must be provided")
        return value.strip()

    @field_validator("email", mode="before")
    @classmethod
    def email_format(cls, value: Any) -> str:
        if not isinstance(value, str) or not is_valid_email(normalize_email(value)):
            raise ValueError("Invalid email format")
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < MINIMUM_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 8 characters long")
        return value

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def parse_date_of_birth(cls, value: Any) -> date:
        return parse_date(value, "dateOfBirth")

    @field_validator("date_of_birth")
    @classmethod
    def adult(cls, value: date) -> date:
        if age_on(value, date.today()) < MINIMUM_DONOR_AGE:
            raise ValueError("User must be at least 18 years old")
        return value

    @field_validator("last_donation_date", mode="before")
    @classmethod
    def parse_last_donation_date(cls, value: Any) -> Optional[date]:
        if value is None or value == "":
            return None
        return parse_date(value, "lastDonationDate")


class LoginRequest(BaseModel):
    """Email/password login. Used for both donor and admin login."""

    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("email", "password")
    @classmethod
    def required(cls, value: str) -> str:
        if not value:
            raise ValueError("Email and password are required")
        return value

    @property
    def normalized_email(self) -> str:
        return normalize_email(self.email)


class AuthSession(BaseModel):
    """A token together with the account it was issued for."""

    token: str
    user: User


class AuthResponse(BaseModel):
    message: str
    token: str
    user: User


class AdminProfile(CamelModel):
    """Admin account view; donor-only fields are omitted."""

    id: str
    name: str
    email: str
    phone: str
    city: str
    location: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "AdminProfile":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            city=user.city,
            location=user.location,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AdminAuthResponse(BaseModel):
    message: str
    token: str
    admin: AdminProfile


class AdminProfileResponse(BaseModel):
    admin: AdminProfile
