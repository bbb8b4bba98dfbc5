"""Pydantic models for validation results, options, and limits."""

from form_validation.models.options import PasswordOptions, SecurityLimits
from form_validation.models.results import (
    BatchValidationResult,
    FieldValidation,
    ValidationResult,
)

__all__ = [
    "BatchValidationResult",
    "FieldValidation",
    "PasswordOptions",
    "SecurityLimits",
    "ValidationResult",
]
