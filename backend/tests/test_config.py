from __future__ import annotations

import pytest

from zapit.core.config import Settings
from zapit.db.session import Database, normalize_database_url


def test_defaults(monkeypatch, tmp_path) -> None:
    for name in ("DATABASE_URL", "LISTEN_IFACE", "LISTEN_PORT", "DOMAIN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env

    settings = Settings()
    assert settings.DATABASE_URL == "sqlite:///./db.sqlite"
    assert settings.DOMAIN == "localhost"
    assert settings.listen_addr == "0.0.0.0:3000"
    assert settings.defaulted() == ["DATABASE_URL", "LISTEN_IFACE", "LISTEN_PORT", "DOMAIN"]


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LISTEN_PORT", "8080")
    monkeypatch.setenv("DOMAIN", "https://zap.example.org")

    settings = Settings()
    assert settings.LISTEN_PORT == 8080
    assert settings.listen_addr.endswith(":8080")
    assert "DOMAIN" not in settings.defaulted()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("sqlite:db.sqlite", "sqlite:///db.sqlite"),
        ("sqlite:///./db.sqlite", "sqlite:///./db.sqlite"),
        ("sqlite://", "sqlite://"),
        ("postgresql://u:p@db/zapit", "postgresql://u:p@db/zapit"),
    ],
)
def test_normalize_database_url(raw: str, expected: str) -> None:
    assert normalize_database_url(raw) == expected


def test_sqlite_file_pool_is_sized(tmp_path) -> None:
    db = Database(f"sqlite:///{tmp_path / 'pool.sqlite'}", pool_size=50)
    try:
        assert db.engine.pool.size() == 50
    finally:
        db.dispose()
