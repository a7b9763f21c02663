from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the xuelong package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from xuelong.app_factory import create_app  # noqa: E402
from xuelong.core import config as core_config  # noqa: E402
from xuelong.core.rate_limiter import reset_limits  # noqa: E402

_ENV_VARS = (
    "STORAGE_BACKEND",
    "DATABASE_URL",
    "AUTH_REQUIRED",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "ADMIN_PASSWORD_HASH",
    "ADMIN_TOKEN",
    "CORS_ORIGINS",
)


@pytest.fixture()
def env(tmp_path, monkeypatch):
    """Point data/uploads at a temporary directory and reset cached settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("UPLOADS_DIR", str(tmp_path / "uploads"))
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()
    reset_limits()


@pytest.fixture()
def data_dir(env) -> Path:
    return env / "data"


@pytest.fixture()
def uploads_dir(env) -> Path:
    return env / "uploads"


@pytest.fixture()
def app(env):
    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def png(name: str = "poster.png") -> tuple[str, bytes, str]:
    return (name, b"\x89PNG\r\n\x1a\n" + name.encode(), "image/png")
