"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        SYSTERS_DB_HOST: Database host (default: localhost)
        SYSTERS_DB_PORT: Database port (default: 5432)
        SYSTERS_DB_DATABASE: Database name (default: systers)
        SYSTERS_DB_USERNAME: Database user (default: systers)
        SYSTERS_DB_PASSWORD: Database password (required in production)
        SYSTERS_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        SYSTERS_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTERS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="systers", description="Database name")
    username: str = Field(default="systers", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class AuthSettings(BaseSettings):
    """Access token settings.

    Environment variables:
        SYSTERS_AUTH_SECRET_KEY: Signing secret for access tokens
        SYSTERS_AUTH_ALGORITHM: JWT signing algorithm (default: HS256)
        SYSTERS_AUTH_ISSUER: Issuer claim written and expected (default: systers)
        SYSTERS_AUTH_ACCESS_TOKEN_TTL_MINUTES: Token lifetime (default: 60)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTERS_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret_key: SecretStr = Field(
        default=SecretStr("change-me-in-production"),
        description="Signing secret for access tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    issuer: str = Field(default="systers", description="JWT issuer claim")
    access_token_ttl_minutes: int = Field(
        default=60,
        description="Access token lifetime in minutes",
        ge=1,
        le=1440,
    )

    @property
    def access_token_ttl(self) -> timedelta:
        """Access token lifetime as a timedelta."""
        return timedelta(minutes=self.access_token_ttl_minutes)


class ContentSettings(BaseSettings):
    """Limits applied to user-generated content.

    Environment variables:
        SYSTERS_CONTENT_POST_MAX_LENGTH (default: 1000)
        SYSTERS_CONTENT_COMMENT_MAX_LENGTH (default: 500)
        SYSTERS_CONTENT_REPORT_DESCRIPTION_MAX_LENGTH (default: 500)
        SYSTERS_CONTENT_REPORT_CATEGORY_MAX_LENGTH (default: 100)
        SYSTERS_CONTENT_FEED_SIZE: Posts shown in a user's feed (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYSTERS_CONTENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    post_max_length: int = Field(default=1000, ge=1)
    comment_max_length: int = Field(default=500, ge=1)
    report_description_max_length: int = Field(default=500, ge=1)
    report_category_max_length: int = Field(default=100, ge=1)
    feed_size: int = Field(default=10, ge=1, le=100)


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Systers API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def auth(self) -> AuthSettings:
        """Get access token settings."""
        return get_auth_settings()

    @property
    def content(self) -> ContentSettings:
        """Get content limit settings."""
        return get_content_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_auth_settings() -> AuthSettings:
    """Get cached access token settings."""
    return AuthSettings()


@lru_cache
def get_content_settings() -> ContentSettings:
    """Get cached content limit settings."""
    return ContentSettings()
