"""
Smoke tests for the SQLDocumentStore against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from xuelong.app_factory import create_app
from xuelong.core import config as core_config
from xuelong.db import session as db_session
from xuelong.db import models
from xuelong.repositories.sql_repository import SQLDocumentStore


@pytest.fixture()
def temp_db(env, monkeypatch):
    """Configure a temporary SQLite file and tear the engine down completely afterwards."""
    db_file = env / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    yield db_file

    engine = db_session.get_engine()
    try:
        models.Base.metadata.drop_all(bind=engine)
    finally:
        engine.dispose()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def test_save_and_load_documents(temp_db):
    store = SQLDocumentStore()
    assert not store.exists("company")
    assert store.load("company", {"name": "default"}) == {"name": "default"}

    store.save("company", {"name": "XUELONG AI"})
    store.save("company", {"name": "XUELONG AI", "phone": "400-888-9999"})
    store.save("posts", [{"id": 1}, {"id": 2}])

    assert store.exists("company")
    assert store.load("company", None) == {"name": "XUELONG AI", "phone": "400-888-9999"}
    assert store.load("posts", None) == [{"id": 1}, {"id": 2}]


def test_app_runs_on_sql_backend(temp_db):
    app = create_app()
    assert isinstance(app.state.services.news.mirror.store, SQLDocumentStore)

    with TestClient(app) as client:
        created = client.post("/api/news", json={"content": "stored in sql", "priority": 1})
        assert created.status_code == 201

    reloaded = SQLDocumentStore()
    contents = [item["content"] for item in reloaded.load("news", {})["news"]]
    assert "stored in sql" in contents
