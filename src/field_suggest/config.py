"""Centralized configuration for field-suggest using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Strictly typed configuration loaded from FIELD_SUGGEST_* environment variables.

    Only ambient behaviour is configurable. The suggestion threshold is a
    fixed rule and intentionally has no setting.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELD_SUGGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="warning", description="Root logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON log lines")
    logger_levels: str = Field(
        default="",
        description="Comma-separated per-logger overrides, e.g. 'field_suggest.cli=debug'",
    )

    # Error messages
    max_listed_candidates: int = Field(
        default=10,
        ge=1,
        description="Known names listed in an unknown-name error when there is no suggestion",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}")
        return normalized.lower()

    @field_validator("logger_levels")
    @classmethod
    def _check_logger_levels(cls, value: str) -> str:
        for name, level in _parse_logger_levels(value).items():
            if level not in VALID_LOG_LEVELS:
                raise ValueError(
                    f"logger_levels entry {name!r} must use one of {', '.join(VALID_LOG_LEVELS)}, got {level!r}"
                )
        return value

    def get_logger_levels(self) -> dict[str, str]:
        """Parse logger_levels into a logger name -> level mapping.

        Malformed entries (missing '=' or empty name) are skipped.
        """
        return _parse_logger_levels(self.logger_levels)


def _parse_logger_levels(raw: str) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for entry in raw.split(","):
        name, sep, level = entry.partition("=")
        name, level = name.strip(), level.strip()
        if not sep or not name or not level:
            continue
        overrides[name] = level.upper()
    return overrides


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
