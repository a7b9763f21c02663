"""
Configuration helpers for the XUELONG AI backend.

Routers and services read settings through ``get_settings()`` instead of
fetching ``os.environ`` directly, so tests can override the environment and
clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: str
    uploads_dir: str
    storage_backend: str
    database_url: str
    admin_username: str
    admin_password: str
    admin_password_hash: str
    admin_email: str
    admin_token: str
    auth_required: bool
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None) -> tuple[str, ...]:
        return tuple(x.strip().rstrip("/") for x in (value or "").split(",") if x.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=os.getenv("DATA_DIR") or str(PROJECT_ROOT / "data"),
        uploads_dir=os.getenv("UPLOADS_DIR") or str(PROJECT_ROOT / "uploads"),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        admin_username=os.getenv("ADMIN_USERNAME", "admin"),
        admin_password=os.getenv("ADMIN_PASSWORD", "admin123"),
        admin_password_hash=os.getenv("ADMIN_PASSWORD_HASH", ""),
        admin_email=os.getenv("ADMIN_EMAIL", "admin@xuelongai.com"),
        admin_token=os.getenv("ADMIN_TOKEN", "sample-jwt-token"),
        auth_required=_bool(os.getenv("AUTH_REQUIRED"), False),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
