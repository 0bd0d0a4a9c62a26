"""
Configuration module using Pydantic Settings.

All settings are loaded from environment variables (or a ``.env`` file)
and validated on load. Obtain them through ``get_settings()``; nothing
else in the package reads the environment.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import Field, PostgresDsn, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict

from authcore.infrastructure.security.jwt_token_issuer import TokenIssuerConfig


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(default="authcore")
    version: str = Field(default="0.1.0")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="/api/v1")

    # -------------------------------------------------------------------------
    # Server Configuration
    # -------------------------------------------------------------------------
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)

    # -------------------------------------------------------------------------
    # Token Settings
    # -------------------------------------------------------------------------
    secret_key: str = Field(
        ...,
        min_length=32,
        description="HMAC secret for token signing. Must be at least 32 characters."
    )
    access_token_expire_minutes: int = Field(default=15, ge=1, le=1440)
    refresh_token_expire_days: int = Field(default=7, ge=1, le=90)
    jwt_issuer: str = Field(default="authcore", min_length=1)

    # Refresh token cookie; Secure defaults to on in production
    refresh_cookie_name: str = Field(default="refresh_token", min_length=1)
    refresh_cookie_secure: bool | None = Field(default=None)

    # Argon2id Password Hashing Configuration
    argon2_time_cost: int = Field(default=2, ge=1, le=10)
    argon2_memory_cost: int = Field(default=65536, ge=8192, le=1048576)  # KiB
    argon2_parallelism: int = Field(default=4, ge=1, le=16)

    # -------------------------------------------------------------------------
    # Identity Store (PostgreSQL)
    # -------------------------------------------------------------------------
    database_url: PostgresDsn = Field(
        ...,
        description="PostgreSQL connection string with asyncpg driver"
    )
    db_pool_size: int = Field(default=5, ge=1, le=50)
    db_max_overflow: int = Field(default=10, ge=0, le=100)
    db_pool_timeout: float = Field(default=10.0, gt=0)
    db_pool_recycle: int = Field(default=3600, ge=300)  # Seconds
    db_pool_pre_ping: bool = Field(default=True)
    db_command_timeout: float = Field(default=5.0, gt=0)

    # -------------------------------------------------------------------------
    # Session Store (Redis)
    # -------------------------------------------------------------------------
    session_store_backend: Literal["redis", "memory"] = Field(default="redis")
    redis_url: RedisDsn = Field(default="redis://localhost:6379/0")
    redis_max_connections: int = Field(default=10, ge=1, le=100)
    redis_operation_timeout: float = Field(default=2.0, gt=0)
    session_key_prefix: str = Field(default="authcore", min_length=1)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------
    default_role_name: str | None = Field(
        default="user",
        description="Role assigned to newly registered users (skipped if missing)"
    )

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/authcore.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def secure_cookies(self) -> bool:
        """Whether the refresh cookie carries the Secure flag."""
        if self.refresh_cookie_secure is not None:
            return self.refresh_cookie_secure
        return self.is_production

    @property
    def database_url_str(self) -> str:
        return str(self.database_url)

    @property
    def redis_url_str(self) -> str:
        return str(self.redis_url)

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return timedelta(days=self.refresh_token_expire_days)

    def token_issuer_config(self) -> TokenIssuerConfig:
        """Build the immutable token issuer configuration."""
        return TokenIssuerConfig(
            secret=self.secret_key,
            access_ttl=self.access_token_ttl,
            refresh_ttl=self.refresh_token_ttl,
            issuer=self.jwt_issuer,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide settings, loaded on first use.

    Tests construct ``Settings(...)`` directly instead.
    """
    return Settings()
