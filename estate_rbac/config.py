"""Application configuration loaded from environment variables."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import Field
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"json", "text"}
_MULTI_ROLE_POLICIES = {"first", "union"}


class LoggingSettings(BaseSettings):
    level: str = "INFO"
    format: str = "json"

    model_config = {"env_prefix": "LOG_"}


class RBACSettings(BaseSettings):
    multi_role_policy: str = "first"  # "first" or "union"
    strict_lint: bool = False  # duplicate permissions fail `lint` too

    model_config = {"env_prefix": "RBAC_"}


@dataclass
class ValidationError:
    """A single config validation error."""

    field: str
    message: str
    hint: str


@dataclass
class ValidationResult:
    """Result of config validation."""

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0

    def add(self, field_name: str, message: str, hint: str = "") -> None:
        self.errors.append(ValidationError(field=field_name, message=message, hint=hint))


class Settings(BaseSettings):
    """Root settings — aggregates all sub-settings."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    rbac: RBACSettings = Field(default_factory=RBACSettings)

    model_config = {"env_prefix": ""}

    def validate_required(self) -> ValidationResult:
        """Validate semantic correctness of configuration.

        Pydantic already validates types; this checks that values
        are among the supported choices.
        """
        result = ValidationResult()

        if self.logging.level.upper() not in _LOG_LEVELS:
            result.add(
                "LOG_LEVEL",
                f"unknown level: {self.logging.level!r}",
                f"Expected one of: {', '.join(sorted(_LOG_LEVELS))}",
            )

        if self.logging.format not in _LOG_FORMATS:
            result.add(
                "LOG_FORMAT",
                f"unknown format: {self.logging.format!r}",
                "Expected json or text",
            )

        if self.rbac.multi_role_policy not in _MULTI_ROLE_POLICIES:
            result.add(
                "RBAC_MULTI_ROLE_POLICY",
                f"unknown policy: {self.rbac.multi_role_policy!r}",
                "Expected first or union",
            )

        return result


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
