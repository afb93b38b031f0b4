"""
Contact validation rules
A pure function over a payload: no shared schema object, no state.
Fields are checked in order name, email, phone and each field reports
at most one violation, so the first entry is what callers show.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 30
PHONE_LENGTH = 10
PHONE_PATTERN = re.compile(r"[6-9][0-9]{9}")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def _check_name(name: Optional[str]) -> Optional[str]:
    if not name:
        return "Name is required."
    if len(name) < NAME_MIN_LENGTH:
        return "Name must be at least 3 characters long."
    if len(name) > NAME_MAX_LENGTH:
        return "Name cannot exceed 30 characters."
    return None


def _check_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return "Email is required."
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "Please enter a valid email address."
    return None


def _check_phone(phone: Optional[str]) -> Optional[str]:
    if phone is None:
        return "Phone number is required."
    if phone == "":
        return "Phone number cannot be empty."
    if len(phone) != PHONE_LENGTH:
        return "Phone number must be exactly 10 digits long."
    if not PHONE_PATTERN.fullmatch(phone):
        return "Phone number is invalid."
    return None


def validate_contact(payload) -> List[FieldError]:
    """
    Check a payload exposing name, email and phone attributes

    Returns:
        Violations in field order, empty when the payload is valid
    """
    checks = (
        ("name", _check_name(payload.name)),
        ("email", _check_email(payload.email)),
        ("phone", _check_phone(payload.phone)),
    )
    return [FieldError(field, message) for field, message in checks if message]


def first_violation(payload) -> Optional[str]:
    errors = validate_contact(payload)
    return errors[0].message if errors else None
