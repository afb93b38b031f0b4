"""
Tests for the contact validation rules and their exact messages
"""

import pytest

from schemas import ContactPayload
from services.validation import FieldError, first_violation, validate_contact


def payload(name="Asha Verma", email="asha@mail.com", phone="9123456789"):
    return ContactPayload(name=name, email=email, phone=phone)


def test_valid_contact_has_no_errors():
    assert validate_contact(payload()) == []
    assert first_violation(payload()) is None


@pytest.mark.parametrize("phone,message", [
    (None, "Phone number is required."),
    ("", "Phone number cannot be empty."),
    ("912345678", "Phone number must be exactly 10 digits long."),
    ("91234567890", "Phone number must be exactly 10 digits long."),
    ("5123456789", "Phone number is invalid."),
    ("91234567ab", "Phone number is invalid."),
])
def test_phone_rules(phone, message):
    assert first_violation(payload(phone=phone)) == message


@pytest.mark.parametrize("name,message", [
    (None, "Name is required."),
    ("", "Name is required."),
    ("Al", "Name must be at least 3 characters long."),
    ("x" * 31, "Name cannot exceed 30 characters."),
])
def test_name_rules(name, message):
    assert first_violation(payload(name=name)) == message


def test_name_boundaries_are_inclusive():
    assert first_violation(payload(name="Ada")) is None
    assert first_violation(payload(name="x" * 30)) is None


@pytest.mark.parametrize("email,message", [
    (None, "Email is required."),
    ("", "Email is required."),
    ("not-an-email", "Please enter a valid email address."),
    ("asha@", "Please enter a valid email address."),
])
def test_email_rules(email, message):
    assert first_violation(payload(email=email)) == message


def test_violations_are_reported_in_field_order():
    errors = validate_contact(payload(name="Al", email="nope", phone="123"))

    assert errors == [
        FieldError("name", "Name must be at least 3 characters long."),
        FieldError("email", "Please enter a valid email address."),
        FieldError("phone", "Phone number must be exactly 10 digits long."),
    ]
    assert first_violation(payload(name="Al", email="nope", phone="123")) == (
        "Name must be at least 3 characters long."
    )


def test_email_check_is_syntax_only():
    # Top-level domains are not checked against a registry
    assert first_violation(payload(email="a@x.notarealtld")) is None
    assert first_violation(payload(email="a@@x.com")) == "Please enter a valid email address."
