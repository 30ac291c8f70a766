"""Unit tests for Settings.

Tests cover:
- Required secrets (database URL, KMS root key)
- KMS root key validation and decoding
- Environment helpers and URL normalization
"""

import base64

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment

ROOT_KEY = base64.b64encode(bytes(range(32))).decode("ascii")


def _settings(**overrides) -> Settings:
    fields = {
        "database_url": "postgresql+asyncpg://u:p@db:5432/app",
        "kms_root_key": ROOT_KEY,
    }
    fields.update(overrides)
    return Settings(**fields)


@pytest.mark.unit
class TestSettings:
    """Test Settings validation."""

    def test_defaults(self):
        """Test non-secret defaults."""
        settings = _settings(environment=Environment.DEVELOPMENT)

        assert settings.app_name == "App Connections"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.casbin_model_path is None
        assert settings.events_strict_mode is False
        assert settings.is_development

    def test_kms_root_key_bytes(self):
        """Test the root key is decoded from base64."""
        assert _settings().kms_root_key_bytes == bytes(range(32))

    def test_kms_root_key_wrong_length(self):
        """Test keys that do not decode to 32 bytes are rejected."""
        with pytest.raises(ValidationError, match="32 bytes"):
            _settings(kms_root_key=base64.b64encode(b"short").decode("ascii"))

    def test_kms_root_key_not_base64(self):
        """Test non-base64 keys are rejected."""
        with pytest.raises(ValidationError, match="base64"):
            _settings(kms_root_key="not base64 !!")

    def test_kms_root_key_required(self, monkeypatch):
        """Test the root key has no default."""
        monkeypatch.delenv("KMS_ROOT_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(database_url="postgresql+asyncpg://u:p@db/app")

    def test_api_base_url_trailing_slash(self):
        """Test trailing slashes are removed."""
        assert _settings(api_base_url="https://api.example.com/").api_base_url == (
            "https://api.example.com"
        )

    @pytest.mark.parametrize(
        ("environment", "attribute"),
        [
            (Environment.TESTING, "is_testing"),
            (Environment.CI, "is_ci"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_environment_helpers(self, environment, attribute):
        """Test exactly one environment helper is true."""
        settings = _settings(environment=environment)

        assert getattr(settings, attribute)
        assert not settings.is_development

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
