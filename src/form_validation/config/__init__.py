"""Configuration for form_validation."""

from form_validation.config.settings import (
    LoggingSettings,
    PasswordPolicySettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "LoggingSettings",
    "PasswordPolicySettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
