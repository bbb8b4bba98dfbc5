"""Shared utilities for the form_validation package."""

from form_validation.utils.logging import configure_logging

__all__ = ["configure_logging"]
