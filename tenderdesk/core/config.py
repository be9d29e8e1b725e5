"""Configuration module for the TenderDesk application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from tenderdesk.core.exceptions import ConfigurationError

load_dotenv()

PLACEHOLDER_SESSION_SECRET = "change_me_session_secret"


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    DB_POOL_SIZE: int
    DB_MAX_OVERFLOW: int
    AUTO_CREATE_SCHEMA: bool
    SESSION_SECRET: str
    DEFAULT_ACTOR_ID: int
    PASSWORD_HASH_ITERATIONS: int
    ACTIVITY_FEED_DEFAULT_LIMIT: int
    ACTIVITY_FEED_MAX_LIMIT: int
    TENDER_PAGE_SIZE_DEFAULT: int
    TENDER_PAGE_SIZE_MAX: int
    API_HOST: str
    API_PORT: int
    API_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=False)
    database_url = (os.getenv("DATABASE_URL") or "").strip()
    if not database_url:
        raise ConfigurationError("DATABASE_URL environment variable is not set.")

    config = Config(
        APP_NAME="TenderDesk",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=database_url,
        DB_POOL_SIZE=int(os.getenv("DB_POOL_SIZE", "10")),
        DB_MAX_OVERFLOW=int(os.getenv("DB_MAX_OVERFLOW", "20")),
        AUTO_CREATE_SCHEMA=_as_bool(
            os.getenv("AUTO_CREATE_SCHEMA"), default=(resolved_env != "production")
        ),
        SESSION_SECRET=os.getenv("SESSION_SECRET", PLACEHOLDER_SESSION_SECRET),
        DEFAULT_ACTOR_ID=int(os.getenv("DEFAULT_ACTOR_ID", "1")),
        PASSWORD_HASH_ITERATIONS=int(os.getenv("PASSWORD_HASH_ITERATIONS", "260000")),
        ACTIVITY_FEED_DEFAULT_LIMIT=int(os.getenv("ACTIVITY_FEED_DEFAULT_LIMIT", "5")),
        ACTIVITY_FEED_MAX_LIMIT=int(os.getenv("ACTIVITY_FEED_MAX_LIMIT", "100")),
        TENDER_PAGE_SIZE_DEFAULT=int(os.getenv("TENDER_PAGE_SIZE_DEFAULT", "10")),
        TENDER_PAGE_SIZE_MAX=int(os.getenv("TENDER_PAGE_SIZE_MAX", "100")),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        API_PREFIX=os.getenv("API_PREFIX", "/api"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if config.DB_POOL_SIZE < 1:
        raise ConfigurationError("DB_POOL_SIZE must be >= 1.")
    if config.DB_MAX_OVERFLOW < 0:
        raise ConfigurationError("DB_MAX_OVERFLOW must be >= 0.")
    if config.DEFAULT_ACTOR_ID < 1:
        raise ConfigurationError("DEFAULT_ACTOR_ID must be >= 1.")
    if config.PASSWORD_HASH_ITERATIONS < 1000:
        raise ConfigurationError("PASSWORD_HASH_ITERATIONS must be >= 1000.")
    if not 1 <= config.ACTIVITY_FEED_DEFAULT_LIMIT <= config.ACTIVITY_FEED_MAX_LIMIT:
        raise ConfigurationError(
            "ACTIVITY_FEED_DEFAULT_LIMIT must be between 1 and ACTIVITY_FEED_MAX_LIMIT."
        )
    if not 1 <= config.TENDER_PAGE_SIZE_DEFAULT <= config.TENDER_PAGE_SIZE_MAX:
        raise ConfigurationError(
            "TENDER_PAGE_SIZE_DEFAULT must be between 1 and TENDER_PAGE_SIZE_MAX."
        )
    if not config.SESSION_SECRET:
        raise ConfigurationError("SESSION_SECRET must not be empty.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and config.SESSION_SECRET == PLACEHOLDER_SESSION_SECRET:
        raise ConfigurationError("Production SESSION_SECRET uses the placeholder value.")
    if config.is_production and "change_me" in config.DATABASE_URL.lower():
        raise ConfigurationError("Production DATABASE_URL uses placeholder credentials.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
