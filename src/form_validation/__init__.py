"""
form_validation: Pure input validation and sanitization for form handling.

This package provides stateless validators that return ValidationResult values,
sanitizers that return cleaned strings, and a batch combinator that aggregates
per-field errors.
"""

from form_validation.exceptions import (
    BatchValidationError,
    FieldValidationError,
    FormValidationError,
)
from form_validation.models import (
    BatchValidationResult,
    FieldValidation,
    PasswordOptions,
    SecurityLimits,
    ValidationResult,
)
from form_validation.rules import (
    SECURITY_LIMITS,
    batch_validate,
    contains_dangerous_chars,
    is_within_length_limit,
    sanitize_email,
    sanitize_name,
    sanitize_password,
    sanitize_text,
    sanitize_whitespace,
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
    "BatchValidationError",
    "BatchValidationResult",
    "FieldValidation",
    "FieldValidationError",
    "FormValidationError",
    "PasswordOptions",
    "SECURITY_LIMITS",
    "SecurityLimits",
    "ValidationResult",
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
