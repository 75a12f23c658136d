from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class MissingRequiredSettingsError(Exception):
    """Raised when required settings are missing."""

    def __init__(self, missing_fields: list[str]) -> None:
        """Initialize with list of missing field names."""
        self.missing_fields = missing_fields
        super().__init__(f"Missing required environment variables: {', '.join(missing_fields)}")


class InvalidSettingsError(Exception):
    """Raised when settings are invalid."""

    def __init__(self, invalid_fields: list[tuple[str, str]]) -> None:
        """Initialize with list of invalid field names and messages."""
        self.invalid_fields = invalid_fields
        summary = ", ".join(f"{field}: {message}" for field, message in invalid_fields)
        super().__init__(f"Invalid environment variables: {summary}")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generative model. The key may also come from the host's config handle.
    openai_api_key: str | None = Field(
        default=None, description="OpenAI API key (fallback when the host config has none)"
    )
    openai_model: str = Field(default="gpt-4o", description="Chat completion model")
    openai_max_tokens: int = Field(default=4000, gt=0, description="Max output tokens per call")

    # Content fetching
    fetch_timeout_seconds: float = Field(default=15.0, gt=0, description="HTTP fetch timeout")
    fetch_user_agent: str = Field(
        default="ContentHoarder/1.0 (+https://github.com/content-hoarder)",
        description="User-Agent header sent when fetching pages and feeds",
    )

    # Local gateway
    storage_path: str | None = Field(
        default=None,
        description="JSON file backing the local gateway storage (in-memory when unset)",
    )
    secrets_path: str | None = Field(
        default=None,
        description="JSON secrets file exposed to actions as the config handle",
    )

    # Optional environment variables (defaults provided)
    app_name: str = "content-hoarder"
    environment: str = "local"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(_LOG_LEVELS)}")
        return normalized


def validate_settings() -> Settings:
    """Validate settings and raise exception for missing or invalid fields.

    Raises:
        MissingRequiredSettingsError: If required environment variables are missing
        InvalidSettingsError: If environment variables hold invalid values
    """
    try:
        return Settings()
    except ValidationError as e:
        missing_fields: list[str] = []
        for error in e.errors():
            if error["type"] == "missing":
                field_name = error["loc"][0] if error["loc"] else "unknown"
                missing_fields.append(str(field_name).upper())

        if missing_fields:
            raise MissingRequiredSettingsError(missing_fields) from e

        invalid_fields: list[tuple[str, str]] = []
        for error in e.errors():
            field_path = ".".join(str(part) for part in error.get("loc", []))
            message = error.get("msg", "Invalid value")
            invalid_fields.append((field_path or "unknown", message))

        if invalid_fields:
            raise InvalidSettingsError(invalid_fields) from e

        raise


# Validate settings at import time.
# Exceptions will propagate to the importing module (e.g., content_hoarder/main.py)
settings = validate_settings()
