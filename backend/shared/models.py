"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for API payloads.

    Fields are declared in snake_case and exchanged as camelCase JSON
    (``blood_group`` <-> ``bloodGroup``). Either form is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Role(str, Enum):
    """Account role. Parsed case-insensitively."""

    DONOR = "donor"
    ADMIN = "admin"

    @classmethod
    def _missing_(cls, value: Any) -> Optional["Role"]:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class BloodGroup(str, Enum):
    """ABO/Rh blood groups."""

    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
