"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults. Override via environment variables
    (prefixed with TOKENPRESS_) or .env file.

    Examples:
        TOKENPRESS_TOKEN_FORMAT=lara
        TOKENPRESS_BASE_PRESET=Lara
        TOKENPRESS_LOG_LEVEL=DEBUG
        TOKENPRESS_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="TOKENPRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "tokenpress"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        description=(
            "Log output format: 'json' for CI pipelines, 'console' for terminals. "
            "Defaults to 'json' in production and 'console' otherwise"
        ),
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Token document
    token_format: str = Field(
        default="aura",
        description="Section key prefix in the token document, e.g. 'aura/primitive'",
    )

    # Generated preset module
    preset_package: str = Field(
        default="@primeuix/themes",
        description="Package that exports definePreset",
    )
    base_preset: str = Field(default="Aura", description="Preset extended by the output")
    base_preset_module: str = Field(
        default="@primeuix/themes/aura",
        description="Module the base preset is imported from",
    )
    component_imports: dict[str, str] = Field(
        default_factory=dict,
        description=(
            "Component presets spliced into the 'components' block, as name to "
            "module path, e.g. {'button': './button/button'}. The component "
            "modules are not generated and must exist next to the output"
        ),
    )
    default_output: Path = Field(
        default=Path("assets/themes/theme-tokens.ts"),
        description="Output path used when the CLI is not given one",
    )

    @field_validator("token_format", mode="after")
    @classmethod
    def strip_token_format(cls, v: str) -> str:
        """Normalize the section prefix so 'aura/' and 'aura' are equivalent."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("token_format must not be empty")
        return v

    @model_validator(mode="after")
    def set_log_format_from_environment(self) -> "Settings":
        """Default to JSON logging in production."""
        if self.log_format is None:
            self.log_format = "json" if self.is_production else "console"
        return self

    def section_key(self, *parts: str) -> str:
        """Build a top-level document key for a section.

        Example:
            settings.section_key("semantic", "light")  # 'aura/semantic/light'
        """
        return "/".join((self.token_format, *parts))

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
