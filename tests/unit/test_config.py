"""Unit tests for configuration validation in content_hoarder/core/config.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from content_hoarder.core import config
from content_hoarder.core.config import InvalidSettingsError, Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fixture that clears every variable the settings read."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)


class TestSettingsValidation:
    """Test settings validation and error handling."""

    def test_settings_optional_fields_have_defaults(self, clean_env: None) -> None:
        """Test that every field works without env vars."""
        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.openai_api_key is None
        assert settings.openai_model == "gpt-4o"
        assert settings.openai_max_tokens == 4000
        assert settings.fetch_timeout_seconds == 15.0
        assert settings.storage_path is None
        assert settings.secrets_path is None
        assert settings.app_name == "content-hoarder"
        assert settings.environment == "local"
        assert settings.log_level == "INFO"

    def test_settings_environment_variable_override(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that environment variables override defaults."""
        # Arrange
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "1000")
        monkeypatch.setenv("STORAGE_PATH", "/tmp/storage.json")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.openai_api_key == "sk-env"
        assert settings.openai_model == "gpt-4o-mini"
        assert settings.openai_max_tokens == 1000
        assert settings.storage_path == "/tmp/storage.json"
        assert settings.log_level == "DEBUG"

    def test_settings_rejects_unknown_log_level(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that an unknown log level is rejected."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("log_level",) for error in errors)

    def test_settings_max_tokens_must_be_positive(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that openai_max_tokens must be a positive integer."""
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "0")

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("openai_max_tokens",) for error in errors)

    def test_validate_settings_error_message(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that validate_settings raises InvalidSettingsError with a helpful message."""
        # Arrange: Prevent Settings from reading .env file by patching model_config
        monkeypatch.setattr(
            config.Settings, "model_config", {**config.Settings.model_config, "env_file": None}
        )
        monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "not-a-number")

        # Act & Assert
        with pytest.raises(InvalidSettingsError) as exc_info:
            config.validate_settings()

        fields = [field for field, _ in exc_info.value.invalid_fields]
        assert fields == ["fetch_timeout_seconds"]
        assert "Invalid environment variables" in str(exc_info.value)
