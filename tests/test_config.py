# tests/test_config.py — Settings tests
import pytest

from tms_service.core.config import Settings


def test_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://tms:tms@db:5432/tms")
    monkeypatch.setenv("API_PREFIX", "/api/v2")
    monkeypatch.setenv("EVENTS_ENABLED", "true")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test,http://b.test")

    settings = Settings()

    assert settings.database_url == "postgresql+psycopg2://tms:tms@db:5432/tms"
    assert settings.api_prefix == "/api/v2"
    assert settings.events_enabled is True
    assert settings.allowed_origins == ["http://a.test", "http://b.test"]
    assert settings.is_sqlite is False


def test_local_postgres_is_the_default(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings()

    assert settings.database_url.startswith("postgresql+psycopg2://")
    assert settings.database_url.endswith("@localhost:5432/otusTMS")


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://tms:tms@db:5432/tms")

    settings = Settings(database_url="sqlite://", db_pool_size=3)

    assert settings.database_url == "sqlite://"
    assert settings.is_sqlite is True
    assert settings.db_pool_size == 3


def test_unknown_override_is_rejected():
    with pytest.raises(ValueError):
        Settings(databse_url="sqlite://")
