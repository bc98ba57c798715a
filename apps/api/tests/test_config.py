"""Tests for settings."""

import pytest
from pydantic import ValidationError

from abival.config import Settings, get_settings
from abival.core.validator import Validator


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults allow signed and hex large integers with no token."""
        monkeypatch.delenv("API_TOKEN", raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_token is None
        assert settings.large_integer_allow_signed
        assert settings.large_integer_allow_hex

    def test_cors_origins_list(self) -> None:
        """Comma-separated origins should be split and trimmed."""
        settings = Settings(_env_file=None, cors_origins=" http://a.test , ,http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_env_overrides_policy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables should flow into the validator."""
        monkeypatch.setenv("LARGE_INTEGER_ALLOW_SIGNED", "false")
        monkeypatch.setenv("LARGE_INTEGER_ALLOW_HEX", "false")

        validator = Validator.from_settings(get_settings())

        assert not validator.allow_signed_large_integers
        assert not validator.allow_hex_large_integers
        assert not validator.validate_large_integer("-5").valid

    def test_log_level_normalized(self) -> None:
        """Log level names are case-insensitive and stored upper-case."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_fails_on_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A bad LOG_LEVEL should fail when settings load, not at startup."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        """Repeated calls should return the same instance."""
        assert get_settings() is get_settings()
