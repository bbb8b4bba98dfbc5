"""
Option and constant models: password policy and security length limits.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PasswordOptions(BaseModel):
    """Password strength policy. Defaults: 8 characters, upper, lower, and a digit."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    min_length: int = Field(default=8, description="Minimum password length")
    require_uppercase: bool = Field(default=True, description="Require at least one A-Z")
    require_lowercase: bool = Field(default=True, description="Require at least one a-z")
    require_number: bool = Field(default=True, description="Require at least one 0-9")


class SecurityLimits(BaseModel):
    """
    Length bounds applied by the sanitizers.

    The values are a published contract; callers reuse them for their own
    form constraints. Use the shared SECURITY_LIMITS instance.
    """

    model_config = ConfigDict(frozen=True)

    EMAIL_MAX_LENGTH: int = 254  # RFC 5321
    PASSWORD_MIN_LENGTH: int = 6
    PASSWORD_MAX_LENGTH: int = 128
    NAME_MAX_LENGTH: int = 100
    GENERAL_TEXT_MAX_LENGTH: int = 500
