from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zapit.core.config import Settings
from zapit.db.session import Database
from zapit.main import create_app


@pytest.fixture
def database(tmp_path) -> Database:
    db = Database(f"sqlite:///{tmp_path / 'zapit.sqlite'}")
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture
def settings(tmp_path) -> Settings:
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "link-solid.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'api.sqlite'}",
        DOMAIN="https://zap.example.org",
        ASSETS_DIR=str(assets),
    )


@pytest.fixture
def client(settings) -> TestClient:
    with TestClient(create_app(settings)) as c:
        yield c
