"""
form_validation Settings Configuration

Centralized configuration using Pydantic settings. Loaded from the environment
and .env by default; YAML loading is supported. Validators do not read settings;
applications use PasswordPolicySettings to build PasswordOptions and
LoggingSettings to configure structlog.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from form_validation.models.options import PasswordOptions

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("json", "console")


class PasswordPolicySettings(BaseSettings):
    """Application password policy; defaults match PasswordOptions."""

    model_config = SettingsConfigDict(env_prefix="PASSWORD_POLICY_", extra="ignore")

    min_length: int = Field(default=8, ge=1, le=128, description="Minimum password length")
    require_uppercase: bool = Field(default=True, description="Require an uppercase letter")
    require_lowercase: bool = Field(default=True, description="Require a lowercase letter")
    require_number: bool = Field(default=True, description="Require a digit")

    def to_options(self) -> PasswordOptions:
        return PasswordOptions(
            min_length=self.min_length,
            require_uppercase=self.require_uppercase,
            require_lowercase=self.require_lowercase,
            require_number=self.require_number,
        )


class LoggingSettings(BaseSettings):
    """
    structlog output for applications embedding form_validation.

    The rule modules only emit DEBUG events (dangerous_content_detected,
    batch_validation_complete), so they are visible only at log_level DEBUG.
    """

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="INFO", description="Filter level passed to configure_logging")
    log_format: str = Field(default="console", description="Renderer: 'json' or 'console'")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {_LOG_FORMATS}")
        return fmt

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")
        return level


class Settings(BaseSettings):
    """
    Root settings class. Loads from .env by default; supports creation from YAML.

    Nested models: password_policy, logging.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    password_policy: PasswordPolicySettings = Field(
        default_factory=PasswordPolicySettings, description="Password policy config"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Create Settings from a YAML file. Top-level keys should match
        nested model names (password_policy, logging).
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        kwargs: dict[str, Any] = {}
        for name, model_class in [
            ("password_policy", PasswordPolicySettings),
            ("logging", LoggingSettings),
        ]:
            if name in data and isinstance(data[name], dict):
                kwargs[name] = model_class.model_validate(data[name])
        return cls(**kwargs)


# Process-wide settings, built on first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the shared Settings, reading the environment and .env the first time."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Rebuild the shared Settings, e.g. after PASSWORD_POLICY_* or LOG_* variables change."""
    global _settings
    _settings = Settings()
    return _settings
