"""
Exceptions for callers that prefer raising over branching on results.

Validators and sanitizers never raise; these are only produced by the opt-in
``raise_for_error`` / ``raise_for_errors`` helpers on result models.
"""

from __future__ import annotations

from typing import Dict


class FormValidationError(Exception):
    """Base class for form_validation errors."""


class FieldValidationError(FormValidationError):
    """A single field failed validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class BatchValidationError(FormValidationError):
    """One or more fields in a batch failed validation."""

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(f"Validation failed for: {', '.join(self.errors)}")
