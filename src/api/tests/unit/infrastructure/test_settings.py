"""Unit tests for infrastructure settings."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from infrastructure.settings import (
    AuthSettings,
    ContentSettings,
    DatabaseSettings,
    Settings,
)


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections
        assert settings.pool_max_connections <= 20

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)

    def test_connection_string_hides_password(self):
        settings = DatabaseSettings(
            host="db", port=5433, database="systers", username="app", password="pw"
        )
        assert settings.connection_string == "postgresql://app@db:5433/systers"
        assert "pw" not in settings.connection_string


class TestEnvironmentOverrides:
    def test_database_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("SYSTERS_DB_HOST", "postgres.internal")
        monkeypatch.setenv("SYSTERS_DB_PORT", "6543")

        settings = DatabaseSettings()

        assert settings.host == "postgres.internal"
        assert settings.port == 6543

    def test_auth_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("SYSTERS_AUTH_SECRET_KEY", "s3cret")
        monkeypatch.setenv("SYSTERS_AUTH_ACCESS_TOKEN_TTL_MINUTES", "15")

        settings = AuthSettings()

        assert settings.secret_key.get_secret_value() == "s3cret"
        assert settings.access_token_ttl == timedelta(minutes=15)

    def test_secret_is_not_rendered(self):
        settings = AuthSettings(secret_key="do-not-print")
        assert "do-not-print" not in repr(settings)


class TestContentSettings:
    def test_defaults(self):
        settings = ContentSettings()

        assert settings.post_max_length == 1000
        assert settings.comment_max_length == 500
        assert settings.report_description_max_length == 500
        assert settings.report_category_max_length == 100
        assert settings.feed_size == 10

    def test_limits_must_be_positive(self):
        with pytest.raises(ValidationError):
            ContentSettings(post_max_length=0)


def test_app_settings_defaults():
    settings = Settings()
    assert settings.app_name == "Systers API"
    assert settings.debug is False
