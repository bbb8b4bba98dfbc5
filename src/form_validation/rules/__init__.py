"""Validation and sanitization rules."""

from form_validation.rules.batch import batch_validate
from form_validation.rules.sanitization import (
    SECURITY_LIMITS,
    contains_dangerous_chars,
    is_within_length_limit,
    sanitize_email,
    sanitize_name,
    sanitize_password,
    sanitize_text,
    sanitize_whitespace,
)
from form_validation.rules.validators import (
    validate_age,
    validate_date_of_birth,
    validate_email,
    validate_max_length,
    validate_min_length,
    validate_name,
    validate_number_range,
    validate_password,
    validate_password_confirmation,
    validate_pattern,
    validate_phone,
    validate_positive_number,
    validate_required,
)

__all__ = [
    "SECURITY_LIMITS",
    "batch_validate",
    "contains_dangerous_chars",
    "is_within_length_limit",
    "sanitize_email",
    "sanitize_name",
    "sanitize_password",
    "sanitize_text",
    "sanitize_whitespace",
    "validate_age",
    "validate_date_of_birth",
    "validate_email",
    "validate_max_length",
    "validate_min_length",
    "validate_name",
    "validate_number_range",
    "validate_password",
    "validate_password_confirmation",
    "validate_pattern",
    "validate_phone",
    "validate_positive_number",
    "validate_required",
]
