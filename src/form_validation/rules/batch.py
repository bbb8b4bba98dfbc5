"""
Batch validation: run several named validators and collect the failures.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Tuple, Union

import structlog

from form_validation.models.results import (
    BatchValidationResult,
    FieldValidation,
    ValidationResult,
)

logger = structlog.get_logger(__name__)

BatchEntry = Union[
    FieldValidation,
    Tuple[str, Callable[[], ValidationResult]],
    Mapping[str, Any],
]


def _unpack(entry: BatchEntry) -> Tuple[str, Callable[[], ValidationResult]]:
    """Accept (field, validator) pairs or {"field": ..., "validator": ...} mappings."""
    if isinstance(entry, Mapping):
        return entry["field"], entry["validator"]
    field, validator = entry
    return field, validator


def batch_validate(validations: Iterable[BatchEntry]) -> BatchValidationResult:
    """
    Invoke each validator once, in order, and aggregate the failures.

    Entries are FieldValidation / (field, validator) pairs or mappings with
    "field" and "validator" keys. Every validator runs even after an earlier one
    fails. Only results that are invalid and carry a non-empty error are
    recorded; a repeated field name keeps the last error.
    """
    errors: Dict[str, str] = {}
    is_valid = True
    count = 0

    for entry in validations:
        field, validator = _unpack(entry)
        count += 1
        result = validator()
        if not result.is_valid and result.error:
            errors[field] = result.error
            is_valid = False

    logger.debug(
        "batch_validation_complete",
        fields=count,
        failed_fields=list(errors),
    )
    return BatchValidationResult(is_valid=is_valid, errors=errors)
