"""
Events module data models.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from shared.models import BloodGroup, CamelModel
from shared.validators import parse_datetime


REQUIRED_TEXT_FIELDS = ("title", "location", "city", "time", "organizer", "contact_number")


class Event(CamelModel):
    """A donation event as stored and returned to clients."""

    id: str
    title: str
    description: Optional[str] = None
    location: str
    city: str
    date: datetime
    time: str
    organizer: str
    contact_number: str
    required_blood_groups: list[BloodGroup] = Field(default_factory=list)
    created_by: str = Field(..., description="ID of the admin who created the event")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    return value.strip()


def _blood_groups(value: Any) -> Any:
    if not isinstance(value, list):
        raise ValueError("requiredBloodGroups must be an array of blood groups")
    return [group.strip() if isinstance(group, str) else group for group in value]


def _unique(groups: list[BloodGroup]) -> list[BloodGroup]:
    return list(dict.fromkeys(groups))


class CreateEventRequest(CamelModel):
    """Body of POST /events."""

    title: str = Field(..., min_length=2, max_length=150)
    description: Optional[str] = Field(None, max_length=2000)
    location: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    date: datetime
    time: str = Field(..., max_length=50)
    organizer: str = Field(..., max_length=150)
    contact_number: str = Field(..., max_length=20)
    required_blood_groups: list[BloodGroup] = Field(default_factory=list)

    @field_validator(*REQUIRED_TEXT_FIELDS, mode="before")
    @classmethod
    def required_text(cls, value: Any) -> str:
        return _text(value, "Missing required fields")

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> datetime:
        return parse_datetime(value, "date")

    @field_validator("required_blood_groups", mode="before")
    @classmethod
    def check_blood_groups(cls, value: Any) -> Any:
        return _blood_groups(value)

    @field_validator("required_blood_groups")
    @classmethod
    def dedupe_blood_groups(cls, value: list[BloodGroup]) -> list[BloodGroup]:
        return _unique(value)

    def to_record(self, created_by: str) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "city": self.city,
            "date": self.date.isoformat(),
            "time": self.time,
            "organizer": self.organizer,
            "contact_number": self.contact_number,
            "required_blood_groups": [group.value for group in self.required_blood_groups],
            "created_by": created_by,
        }


class UpdateEventRequest(CamelModel):
    """Body of PUT /events/{id}. Only the listed fields may be sent."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=2, max_length=150)
    description: Optional[str] = Field(None, max_length=2000)
    location: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    date: Optional[datetime] = None
    time: Optional[str] = Field(None, max_length=50)
    organizer: Optional[str] = Field(None, max_length=150)
    contact_number: Optional[str] = Field(None, max_length=20)
    required_blood_groups: Optional[list[BloodGroup]] = None

    @field_validator(*REQUIRED_TEXT_FIELDS, mode="before")
    @classmethod
    def required_text(cls, value: Any, info: ValidationInfo) -> str:
        return _text(value, f"{info.field_name} must be a non-empty string")

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> datetime:
        return parse_datetime(value, "date")

    @field_validator("required_blood_groups", mode="before")
    @classmethod
    def check_blood_groups(cls, value: Any) -> Any:
        return _blood_groups(value)

    @field_validator("required_blood_groups")
    @classmethod
    def dedupe_blood_groups(cls, value: Optional[list[BloodGroup]]) -> Optional[list[BloodGroup]]:
        return _unique(value) if value is not None else None

    def to_update(self) -> dict[str, Any]:
        """Column/value pairs for the fields actually sent."""
        update: dict[str, Any] = {}
        for field in self.model_fields_set:
            value = getattr(self, field)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif field == "required_blood_groups":
                value = [group.value for group in value]
            update[field] = value
        return update


class EventResponse(BaseModel):
    event: Event


class EventMutationResponse(BaseModel):
    message: str
    event: Event


class EventListResponse(BaseModel):
    events: list[Event]
