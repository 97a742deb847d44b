"""Field validators shared by create and partial-update paths.

Every validator has the signature ``(field, value) -> value`` and either
returns the normalised value or raises :class:`FieldValidationError` with a
message meant to be shown to the user verbatim.
"""

import re
from collections.abc import Callable
from datetime import date, time
from enum import Enum
from typing import Any

from app.domain.exceptions import FieldValidationError

Validator = Callable[[str, Any], Any]

_PHONE_RE = re.compile(r"^\d{10}$")
_AADHAAR_RE = re.compile(r"^\d{12}$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def non_empty_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise FieldValidationError(field, f"{_label(field)} cannot be empty")
    return value.strip()


def optional_text(field: str, value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldValidationError(field, f"{_label(field)} must be text")
    return value.strip() or None


def phone_number(field: str, value: Any) -> str:
    if not isinstance(value, str) or not _PHONE_RE.match(value):
        raise FieldValidationError(field, "Phone number must be exactly 10 digits")
    return value


def aadhaar_number(field: str, value: Any) -> str:
    if not isinstance(value, str) or not _AADHAAR_RE.match(value):
        raise FieldValidationError(field, "Aadhaar number must be exactly 12 digits")
    return value


def email_address(field: str, value: Any) -> str:
    if not isinstance(value, str) or not _EMAIL_RE.match(value.strip()):
        raise FieldValidationError(field, "Invalid email format")
    return value.strip().lower()


def positive_number(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise FieldValidationError(field, f"{_label(field)} must be greater than 0")
    return value


def non_negative_int(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise FieldValidationError(field, f"{_label(field)} must be a non-negative whole number")
    return value


def positive_int(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise FieldValidationError(field, f"{_label(field)} must be a positive whole number")
    return value


def calendar_date(field: str, value: Any) -> date:
    if not isinstance(value, date):
        raise FieldValidationError(field, f"{_label(field)} must be a valid date (YYYY-MM-DD)")
    return value


def clock_time(field: str, value: Any) -> time:
    if not isinstance(value, time):
        raise FieldValidationError(field, f"{_label(field)} must be a valid time (HH:MM:SS)")
    return value


def one_of(enum_cls: type[Enum]) -> Validator:
    """Build a validator accepting only the values of ``enum_cls``."""
    allowed = [member.value for member in enum_cls]
    if len(allowed) == 2:
        choices = f"{allowed[0]} or {allowed[1]}"
    else:
        choices = ", ".join(allowed[:-1]) + f", or {allowed[-1]}"

    def _validate(field: str, value: Any) -> Enum:
        try:
            return enum_cls(value)
        except ValueError:
            raise FieldValidationError(field, f"{_label(field)} must be {choices}") from None

    return _validate
