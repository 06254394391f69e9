"""
Registrations module data models.

A registration binds one user to one event. The pair is unique.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import CamelModel
from modules.events.models import Event
from modules.users.models import UserSummary


class RegistrationStatus(str, Enum):
    """Registration status. Registrations are never updated in place."""

    REGISTERED = "registered"


class Registration(CamelModel):
    """A stored registration row."""

    id: str
    user_id: str
    event_id: str
    status: str = RegistrationStatus.REGISTERED.value
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RegistrationWithEvent(Registration):
    """Registration with its event; ``event`` is None if the event was deleted."""

    event: Optional[Event] = None


class RegistrationDetail(RegistrationWithEvent):
    """Registration with both its event and a summary of its user."""

    user: Optional[UserSummary] = None


class CreateRegistrationRequest(CamelModel):
    """Body of POST /registrations."""

    event_id: str = Field(..., description="ID of the event to register for")

    @field_validator("event_id", mode="before")
    @classmethod
    def required(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("eventId is required")
        return value.strip()


class RegistrationCreatedResponse(BaseModel):
    message: str
    registration: RegistrationDetail


class MyRegistrationsResponse(BaseModel):
    registrations: list[RegistrationWithEvent]


class RegistrationListResponse(BaseModel):
    registrations: list[RegistrationDetail]
