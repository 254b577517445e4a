"""Field normalizers for person records.

Each normalizer strips surrounding whitespace, validates the value and returns
the canonical form. Invalid input raises FieldValidationError.
"""

import re
from typing import Final


class FieldValidationError(ValueError):
    """Raised when a person field value fails validation."""

    def __init__(self, field_name: str, message: str):
        super().__init__(message)
        self.field_name = field_name


NAME_PATTERN: Final = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
PHONE_PATTERN: Final = re.compile(r"^\d{3,}$")
EMAIL_PATTERN: Final = re.compile(
    r"^[A-Za-z0-9]([A-Za-z0-9+_.-]*[A-Za-z0-9])?"
    r"@[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)*$"
)
TAG_PATTERN: Final = re.compile(r"^[A-Za-z0-9]+$")

MIN_YEAR_JOINED: Final[int] = 2000
MAX_YEAR_JOINED: Final[int] = 2099


def normalize_name(value: str) -> str:
    token = (value or "").strip()
    if not NAME_PATTERN.match(token):
        raise FieldValidationError("name", "Names should only contain alphanumeric characters and spaces, and it should not be blank")
    return token


def normalize_phone(value: str) -> str:
    token = (value or "").strip()
    if not PHONE_PATTERN.match(token):
        raise FieldValidationError("phone", "Phone numbers should only contain numbers, and it should be at least 3 digits long")
    return token


def normalize_email(value: str) -> str:
    token = (value or "").strip()
    if not EMAIL_PATTERN.match(token):
        raise FieldValidationError("email", f"Invalid email address: {value!r}")
    return token


def normalize_address(value: str) -> str:
    token = (value or "").strip()
    if not token:
        raise FieldValidationError("address", "Addresses can take any values, and it should not be blank")
    return token


def normalize_tag(value: str) -> str:
    token = (value or "").strip()
    if not TAG_PATTERN.match(token):
        raise FieldValidationError("tag", f"Tags names should be alphanumeric: {value!r}")
    return token


def normalize_year_joined(value) -> int:
    """Accept an int or a numeric string; years are four digits in 2000-2099."""
    try:
        year = int(str(value).strip())
    except (TypeError, ValueError):
        raise FieldValidationError("year_joined", f"Year joined must be a number: {value!r}") from None
    if not MIN_YEAR_JOINED <= year <= MAX_YEAR_JOINED:
        raise FieldValidationError(
            "year_joined",
            f"Year joined must be between {MIN_YEAR_JOINED} and {MAX_YEAR_JOINED}",
        )
    return year


__all__ = [
    "FieldValidationError",
    "normalize_name",
    "normalize_phone",
    "normalize_email",
    "normalize_address",
    "normalize_tag",
    "normalize_year_joined",
]
