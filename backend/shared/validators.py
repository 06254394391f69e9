"""
Small parsing helpers shared by request models and services.
"""

import re
from datetime import date, datetime, timezone
from uuid import UUID

from dateutil.parser import isoparse

from .exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(value: str) -> str:
    """Trim and lower-case an email address. Emails are case-insensitive."""
    return value.strip().lower()


def is_valid_email(value: str) -> bool:
    """Shape check only: one @, no whitespace, a dot in the domain."""
    return EMAIL_PATTERN.fullmatch(value) is not None


def parse_date(value: object, field: str) -> date:
    """
    Parse an ISO 8601 date or datetime string into a date.

    Raises:
        ValueError: "Invalid <field>" for anything unparseable
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid {field}")
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid {field}")


def parse_datetime(value: object, field: str) -> datetime:
    """
    Parse an ISO 8601 date or datetime string. Naive values are taken as UTC.

    Raises:
        ValueError: "Invalid <field>" for anything unparseable
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError):
            raise ValueError(f"Invalid {field}")
    else:
        raise ValueError(f"Invalid {field}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def age_on(born: date, today: date) -> int:
    """Whole years elapsed between ``born`` and ``today``."""
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def ensure_uuid(value: str, resource: str) -> str:
    """
    Validate an identifier and return its canonical string form.

    Raises:
        ValidationError: "Invalid <resource> id"
    """
    try:
        return str(UUID(str(value)))
    except (ValueError, AttributeError, TypeError):
        raise ValidationError(f"Invalid {resource} id", code="INVALID_ID")
