from __future__ import annotations

import os
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "inventory-api"
    ENV: str = "dev"
    VERSION: str = "1.0.0"

    # Database: either a full URL or the discrete Postgres parts below
    DATABASE_URL: str | None = None
    DB_HOST: str | None = None
    DB_PORT: int = 5432
    DB_USER: str | None = None
    DB_PASSWORD: str | None = None
    DB_NAME: str | None = None
    DB_SSLMODE: str = "require"

    # Auth
    JWT_SECRET: str = "change_me"
    JWT_ISSUER: str = "inventory-api"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Stock alerting
    LOW_STOCK_DEFAULT_THRESHOLD: int = 5
    ALERT_PROCESSING_DELAY_MS: int = 10
    ALERT_MAX_WORKERS: int = 32
    ALERT_TIMEOUT_SECONDS: float | None = None  # None waits for every unit

    # HTTP
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "20/second"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CONTENT_SECURITY_POLICY: str = "default-src 'self'"
    HSTS_SECONDS: int = 3600

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"
    SENTRY_DSN: str | None = None
    AUDIT_LOG_FILE: str | None = None

    @field_validator("ALERT_MAX_WORKERS")
    @classmethod
    def _positive_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("ALERT_MAX_WORKERS must be at least 1")
        return v

    @model_validator(mode="after")
    def _validate_required_fields(self) -> BaseAppSettings:
        if not self.DATABASE_URL and self.DB_HOST:
            self.DATABASE_URL = (
                f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}"
                f"/{self.DB_NAME}?sslmode={self.DB_SSLMODE}"
            )
        # Heroku/Neon style URLs
        if self.DATABASE_URL and self.DATABASE_URL.startswith("postgres://"):
            self.DATABASE_URL = self.DATABASE_URL.replace("postgres://", "postgresql://", 1)

        if self.ENV.lower() == "prod":
            if not self.DATABASE_URL:
                raise ValueError("Missing required production settings: DATABASE_URL")
            if self.JWT_SECRET == "change_me":
                raise ValueError("Insecure default secrets in production: JWT_SECRET uses default placeholder")
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"
    DATABASE_URL: str | None = "sqlite:///./inventory.db"


class TestSettings(BaseAppSettings):
    ENV: str = "test"
    DATABASE_URL: str | None = "sqlite:///:memory:"
    JWT_SECRET: str = "test-secret"
    RATE_LIMIT_ENABLED: bool = False


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    LOG_FORMAT: str = "json"
    HSTS_SECONDS: int = 31_536_000


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()
