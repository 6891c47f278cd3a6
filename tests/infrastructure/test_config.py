"""Settings: environment overrides and URL normalization."""

from stridefund.config import Settings


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url.startswith("sqlite+aiosqlite")


def test_defaults(monkeypatch):
    monkeypatch.delenv("LEADERBOARD_SIZE", raising=False)
    settings = Settings()
    assert settings.leaderboard_size == 10
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100


def test_env_override(monkeypatch):
    monkeypatch.setenv("LEADERBOARD_SIZE", "25")
    monkeypatch.setenv("LOG_FORMAT", "text")
    settings = Settings()
    assert settings.leaderboard_size == 25
    assert settings.log_format == "text"
