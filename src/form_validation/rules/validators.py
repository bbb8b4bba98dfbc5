"""
Field validators for form input.

Each validator returns a ValidationResult and stops at the first failing check;
the order of checks decides which message the caller sees. Validators never
raise for inputs of their declared type: malformed values (None, NaN, a
non-date "date") are ordinary failures.
"""

from __future__ import annotations

import math
import numbers
import re
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Pattern, Union

from form_validation.models.options import PasswordOptions
from form_validation.models.results import ValidationResult
from form_validation.rules.sanitization import trim

_EMAIL = re.compile(r"[^\s\ufeff@]+@[^\s\ufeff@]+\.[^\s\ufeff@]+")
# E.164: leading +, country code 1-9, up to 15 digits total
_PHONE = re.compile(r"\+[1-9]\d{1,14}", re.ASCII)
_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")

MIN_AGE = 13
MAX_AGE = 120


def _is_blank(value: Optional[str]) -> bool:
    """Missing or entirely whitespace."""
    return not value or trim(value) == ""


def _is_number(value: Any) -> bool:
    if isinstance(value, Decimal):
        return not value.is_nan()
    if not isinstance(value, numbers.Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _fmt(value: Union[int, float]) -> str:
    """Render numbers as written: 100.0 -> '100', 1.5 -> '1.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# ACCOUNT FIELDS
# =============================================================================


def validate_email(email: Optional[str]) -> ValidationResult:
    if _is_blank(email):
        return ValidationResult.fail("Email is required")
    if not _EMAIL.fullmatch(email):
        return ValidationResult.fail("Please enter a valid email address")
    return ValidationResult.ok()


def validate_password(
    password: Optional[str],
    options: Optional[Union[PasswordOptions, Mapping[str, Any]]] = None,
) -> ValidationResult:
    """
    Validate password strength.

    Args:
        password: Password to validate.
        options: PasswordOptions, or a mapping with any of min_length,
            require_uppercase, require_lowercase, require_number. Missing keys
            take the defaults (8, True, True, True).

    Checks run in order: required, length, uppercase, lowercase, digit.
    """
    if options is None:
        opts = PasswordOptions()
    elif isinstance(options, PasswordOptions):
        opts = options
    else:
        opts = PasswordOptions.model_validate(dict(options))

    if _is_blank(password):
        return ValidationResult.fail("Password is required")
    if len(password) < opts.min_length:
        return ValidationResult.fail(f"Password must be at least {opts.min_length} characters")
    if opts.require_uppercase and not _UPPERCASE.search(password):
        return ValidationResult.fail("Password must contain at least one uppercase letter")
    if opts.require_lowercase and not _LOWERCASE.search(password):
        return ValidationResult.fail("Password must contain at least one lowercase letter")
    if opts.require_number and not _DIGIT.search(password):
        return ValidationResult.fail("Password must contain at least one number")
    return ValidationResult.ok()


def validate_password_confirmation(
    password: Optional[str], confirm_password: Optional[str]
) -> ValidationResult:
    # Only an empty confirmation counts as missing; whitespace is compared as-is.
    if not confirm_password:
        return ValidationResult.fail("Please confirm your password")
    if password != confirm_password:
        return ValidationResult.fail("Passwords do not match")
    return ValidationResult.ok()


# =============================================================================
# GENERAL TEXT FIELDS
# =============================================================================


def validate_required(value: Optional[str], field_name: str = "This field") -> ValidationResult:
    if _is_blank(value):
        return ValidationResult.fail(f"{field_name} is required")
    return ValidationResult.ok()


def validate_name(
    name: Optional[str], field_name: str = "Name", min_length: int = 2
) -> ValidationResult:
    if _is_blank(name):
        return ValidationResult.fail(f"{field_name} is required")
    if len(trim(name)) < min_length:
        return ValidationResult.fail(f"{field_name} must be at least {min_length} characters")
    return ValidationResult.ok()


def validate_phone(phone: Optional[str]) -> ValidationResult:
    """Validate an international phone number in E.164 form, e.g. +14155552671."""
    if _is_blank(phone):
        return ValidationResult.fail("Phone number is required")
    if not _PHONE.fullmatch(phone):
        return ValidationResult.fail("Please enter a valid phone number")
    return ValidationResult.ok()


def validate_min_length(
    value: Optional[str], min_length: int, field_name: str = "Field"
) -> ValidationResult:
    if not value or len(trim(value)) < min_length:
        return ValidationResult.fail(f"{field_name} must be at least {min_length} characters")
    return ValidationResult.ok()


def validate_max_length(
    value: Optional[str], max_length: int, field_name: str = "Field"
) -> ValidationResult:
    # A missing value is never too long.
    if value and len(trim(value)) > max_length:
        return ValidationResult.fail(f"{field_name} must be at most {max_length} characters")
    return ValidationResult.ok()


def validate_pattern(
    value: Optional[str],
    pattern: Union[str, Pattern[str]],
    field_name: str = "Field",
    error_message: Optional[str] = None,
) -> ValidationResult:
    """
    Validate value against a custom regex.

    The pattern is searched, not anchored; include ^ and $ to match the whole value.
    A falsy value fails as required before the pattern is tried.
    """
    if not value:
        return ValidationResult.fail(f"{field_name} is required")
    if not re.search(pattern, value):
        return ValidationResult.fail(error_message or f"{field_name} format is invalid")
    return ValidationResult.ok()


# =============================================================================
# NUMERIC FIELDS
# =============================================================================


def validate_number_range(
    value: Any,
    min_value: Union[int, float],
    max_value: Union[int, float],
    field_name: str = "Value",
) -> ValidationResult:
    if not _is_number(value):
        return ValidationResult.fail(f"{field_name} must be a number")
    if value < min_value or value > max_value:
        return ValidationResult.fail(
            f"{field_name} must be between {_fmt(min_value)} and {_fmt(max_value)}"
        )
    return ValidationResult.ok()


def validate_positive_number(value: Any, field_name: str = "Value") -> ValidationResult:
    if not _is_number(value):
        return ValidationResult.fail(f"{field_name} must be a number")
    if value <= 0:
        return ValidationResult.fail(f"{field_name} must be greater than 0")
    return ValidationResult.ok()


def validate_age(age: Any) -> ValidationResult:
    return validate_number_range(age, MIN_AGE, MAX_AGE, "Age")


# =============================================================================
# DATES
# =============================================================================


def validate_date_of_birth(value: Any) -> ValidationResult:
    """
    Validate a date of birth for an age between 13 and 120.

    Age is the difference in calendar years only; month and day are ignored,
    so someone turning 13 later this year already passes.
    """
    if not isinstance(value, date):
        return ValidationResult.fail("Please enter a valid date")

    age = date.today().year - value.year

    if age < MIN_AGE:
        return ValidationResult.fail(f"You must be at least {MIN_AGE} years old")
    if age > MAX_AGE:
        return ValidationResult.fail("Please enter a valid date of birth")
    return ValidationResult.ok()
