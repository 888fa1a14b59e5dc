"""Field rules for contact and fund-membership requests."""
from __future__ import annotations

import re
from typing import Optional

NAME_MAX_LENGTH = 100
# ids are SQLite INTEGER (signed 64-bit)
MAX_ID = 2**63 - 1
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+")
PHONE_PATTERN = re.compile(r"\+?[0-9\s\-\(\)]+")


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value.strip()))


def is_valid_phone(value: str | None) -> bool:
    if not value:
        return False
    return bool(PHONE_PATTERN.fullmatch(value))


def contact_errors(name: Optional[str], email: Optional[str], phone: Optional[str]) -> list[str]:
    """Return one message per broken rule; empty when the contact is valid."""
    errors: list[str] = []
    name_value = (name or "").strip()
    if not name_value:
        errors.append("Name is required")
    elif len(name_value) > NAME_MAX_LENGTH:
        errors.append(f"Name cannot exceed {NAME_MAX_LENGTH} characters")
    if email and not is_valid_email(email):
        errors.append("A valid email address is required")
    if phone and not is_valid_phone(phone):
        errors.append("A valid phone number is required")
    return errors


def contact_id_errors(contact_id: Optional[int]) -> list[str]:
    if contact_id is None:
        return ["ContactId is required"]
    errors: list[str] = []
    if contact_id == 0:
        errors.append("ContactId is required")
    if contact_id <= 0:
        errors.append("ContactId must be greater than 0")
    if contact_id > MAX_ID:
        errors.append(f"ContactId must be less than or equal to {MAX_ID}")
    return errors
