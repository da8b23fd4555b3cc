from __future__ import annotations

from jobly.config import Settings, _parse_admin_emails, build_sqlalchemy_db_url, is_admin_email


def test_parse_admin_emails_json_array() -> None:
    assert _parse_admin_emails('["A@Example.com", "ops@example.com"]') == ["a@example.com", "ops@example.com"]


def test_parse_admin_emails_comma_separated() -> None:
    assert _parse_admin_emails(" a@example.com , ,b@example.com") == ["a@example.com", "b@example.com"]


def test_parse_admin_emails_empty() -> None:
    assert _parse_admin_emails(None) == []
    assert _parse_admin_emails("  ") == []


def test_is_admin_email_normalizes() -> None:
    assert is_admin_email("  ADMIN@example.com ")
    assert not is_admin_email("user@example.com")


def test_admin_allowlist_merges_list_and_single_email() -> None:
    s = Settings(ADMIN_EMAILS="a@example.com", ADMIN_EMAIL=" Ops@Example.com ")
    assert s.admin_allowlist == {"a@example.com", "ops@example.com"}
    assert is_admin_email("OPS@example.com", s)
    assert not is_admin_email("admin@example.com", s)


def test_admin_allowlist_empty_by_default() -> None:
    s = Settings(ADMIN_EMAILS=None, ADMIN_EMAIL=None)
    assert s.admin_allowlist == frozenset()


def test_db_url_prefers_explicit_url() -> None:
    s = Settings(DB_URL="sqlite:///./other.db")
    assert build_sqlalchemy_db_url(s) == "sqlite:///./other.db"


def test_db_url_built_from_parts_outside_development() -> None:
    s = Settings(
        DB_URL=None,
        environment="production",
        DB_HOST="db",
        DB_PORT=5433,
        DB_NAME="jobly",
        DB_USER="app",
        DB_PASSWORD="pw",
    )
    assert build_sqlalchemy_db_url(s) == "postgresql+psycopg://app:pw@db:5433/jobly"


def test_db_url_defaults_to_sqlite_in_development() -> None:
    s = Settings(DB_URL=None, environment="development")
    assert build_sqlalchemy_db_url(s).startswith("sqlite")
