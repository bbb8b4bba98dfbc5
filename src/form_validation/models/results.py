"""
Result models returned by validators and the batch combinator.

Every validation call produces a fresh, frozen ValidationResult. The batch
combinator consumes FieldValidation pairs and produces a BatchValidationResult.
"""

from __future__ import annotations

from typing import Callable, Dict, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from form_validation.exceptions import BatchValidationError, FieldValidationError


# -----------------------------------------------------------------------------
# Single-field result
# -----------------------------------------------------------------------------


class ValidationResult(BaseModel):
    """Outcome of a single validation: validity flag plus an optional error."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="True when the value passed every check")
    error: Optional[str] = Field(
        default=None,
        description="Human-readable reason for the first failing check; None when valid",
    )

    @model_validator(mode="after")
    def error_only_when_invalid(self) -> "ValidationResult":
        if self.is_valid and self.error is not None:
            raise ValueError("error must be None when is_valid is True")
        return self

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=message)

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_error(self, field: str = "value") -> None:
        """Raise FieldValidationError if this result is invalid."""
        if not self.is_valid:
            raise FieldValidationError(field, self.error or "is invalid")


# -----------------------------------------------------------------------------
# Batch validation
# -----------------------------------------------------------------------------


class FieldValidation(NamedTuple):
    """A named, deferred validator call. Plain (field, validator) tuples work too."""

    field: str
    validator: Callable[[], ValidationResult]


class BatchValidationResult(BaseModel):
    """Aggregate of a batch run: overall validity and field -> error for failures only."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="True only if no field failed")
    errors: Dict[str, str] = Field(
        default_factory=dict,
        description="Error message per failing field; passing fields are absent",
    )

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_errors(self) -> None:
        """Raise BatchValidationError listing every failing field."""
        if not self.is_valid:
            raise BatchValidationError(self.errors)
