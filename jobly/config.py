from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# The project-root .env is the source of truth for local runs; tests configure
# the environment themselves and must not pick it up.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)

_SQLITE_ENVIRONMENTS = ("development", "test")


def _normalize_email(value: str) -> str:
    return (value or "").strip().strip("\"'").strip().lower()


def _parse_admin_emails(raw: Any) -> list[str]:
    """Accept a list, a JSON array string or a comma-separated string."""
    if raw is None:
        return []
    if isinstance(raw, str):
        text = raw.strip()
        try:
            raw = json.loads(text) if text.startswith("[") else text.split(",")
        except ValueError:
            raw = text.strip("[]").split(",")
    elif not isinstance(raw, (list, tuple, set)):
        raw = [raw]

    return [email for email in (_normalize_email(str(item)) for item in raw if item is not None) if email]


class Settings(BaseSettings):
    app_name: str = Field(default="Jobly")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=True)

    # DB_URL wins when set; otherwise development/test runs on sqlite and
    # every other environment builds a PostgreSQL URL from the DB_* parts.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="jobly", validation_alias="DB_NAME")
    db_user: str = Field(default="jobly", validation_alias="DB_USER")
    db_password: str = Field(default="password", validation_alias="DB_PASSWORD")

    jwt_secret: str = Field(default="change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # Accounts allowed to create, update and delete companies and jobs.
    #   ADMIN_EMAILS=["admin@example.com","ops@example.com"]
    #   ADMIN_EMAILS=admin@example.com,ops@example.com
    # ADMIN_EMAIL adds a single address on top of the list.
    admin_emails: list[str] = Field(default_factory=list, validation_alias="ADMIN_EMAILS")
    admin_email: str | None = Field(default=None, validation_alias="ADMIN_EMAIL")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("admin_emails", mode="before")
    @classmethod
    def _validate_admin_emails(cls, v: Any) -> list[str]:
        return _parse_admin_emails(v)

    @property
    def admin_allowlist(self) -> frozenset[str]:
        return frozenset([*self.admin_emails, *_parse_admin_emails(self.admin_email)])


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url

    if settings.environment.lower() in _SQLITE_ENVIRONMENTS:
        return "sqlite:///./dev.db"

    # Passwords with URL-reserved characters should go through DB_URL instead.
    return (
        f"postgresql+psycopg://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
    )


def is_admin_email(email: str, settings: Settings = settings) -> bool:
    return _normalize_email(email) in settings.admin_allowlist
