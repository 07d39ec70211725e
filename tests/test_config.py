"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from salonbook.config import Settings

ENV_VARS = [
    "DATABASE_URL",
    "PORT",
    "SALONBOOK_DATABASE_URL",
    "SALONBOOK_DB_PATH",
    "SALONBOOK_ENV",
    "SALONBOOK_POOL_MIN",
    "SALONBOOK_POOL_MAX",
    "SALONBOOK_PORT",
    "SALONBOOK_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.database_url is None
    assert settings.environment == "development"
    assert settings.is_development
    assert (settings.pool_min, settings.pool_max) == (2, 10)
    assert settings.port == 3000
    assert settings.slow_query_ms == 1000
    assert settings.shutdown_timeout == 10


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://salon@db/salon")
    monkeypatch.setenv("SALONBOOK_ENV", "production")
    monkeypatch.setenv("SALONBOOK_POOL_MAX", "20")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SALONBOOK_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.database_url == "postgresql://salon@db/salon"
    assert not settings.is_development
    assert settings.pool_max == 20
    assert settings.port == 8080
    assert settings.log_level == "debug"


def test_salonbook_url_takes_precedence(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://a/a")
    monkeypatch.setenv("SALONBOOK_DATABASE_URL", "postgresql://b/b")

    assert Settings.from_env().database_url == "postgresql://b/b"


def test_db_path_variable(monkeypatch):
    monkeypatch.setenv("SALONBOOK_DB_PATH", "/tmp/salon.db")

    assert Settings.from_env().database_path == "/tmp/salon.db"


def test_empty_integer_uses_default(monkeypatch):
    monkeypatch.setenv("PORT", "")

    assert Settings.from_env().port == 3000


def test_malformed_integer_raises(monkeypatch):
    monkeypatch.setenv("SALONBOOK_POOL_MIN", "two")

    with pytest.raises(ValidationError, match="pool_min"):
        Settings.from_env()


def test_constructor_accepts_field_names():
    settings = Settings(database_url="sqlite:///x.db", environment="production", port=9000)

    assert settings.database_url == "sqlite:///x.db"
    assert settings.environment == "production"
    assert settings.port == 9000


def test_with_overrides_ignores_none():
    settings = Settings(port=3000, host="0.0.0.0")

    updated = settings.with_overrides(port=9000, host=None)

    assert updated.port == 9000
    assert updated.host == "0.0.0.0"
    assert settings.port == 3000
