# backend/zapit/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- Database ----
    # Any SQLAlchemy URL; sqlx-style "sqlite:db.sqlite" is accepted too
    DATABASE_URL: str = "sqlite:///./db.sqlite"
    # Ignored for in-memory SQLite (single shared connection)
    DB_POOL_SIZE: int = 50

    # ---- Listener ----
    LISTEN_IFACE: str = "0.0.0.0"
    LISTEN_PORT: int = 3000

    # ---- Feed ----
    # Public base URL of this service, used for the channel link and icon
    DOMAIN: str = "localhost"
    ASSETS_DIR: str = "assets"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def listen_addr(self) -> str:
        return f"{self.LISTEN_IFACE}:{self.LISTEN_PORT}"

    def defaulted(self) -> list[str]:
        """Names of the deployment-relevant settings that fell back to defaults."""
        watched = ("DATABASE_URL", "LISTEN_IFACE", "LISTEN_PORT", "DOMAIN")
        return [name for name in watched if name not in self.model_fields_set]


@lru_cache
def get_settings() -> Settings:
    return Settings()
