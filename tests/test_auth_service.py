from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from xuelong.app_factory import create_app
from xuelong.core import config as core_config
from xuelong.core.security import hash_password, verify_password
from xuelong.services.auth_service import AuthService, InvalidCredentialsError, TokenInvalidError


def test_login_returns_fixed_token(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert resp.status_code == 200
    assert resp.json() == {
        "token": "sample-jwt-token",
        "user": {"id": 1, "username": "admin", "email": "admin@xuelongai.com"},
    }


def test_login_rejects_wrong_password(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid credentials"}


def test_login_is_rate_limited(client):
    for _ in range(10):
        client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 429


def test_logout(client):
    assert client.post("/api/auth/logout").json() == {"message": "Logged out successfully"}


def test_password_hash_takes_precedence(env, monkeypatch):
    monkeypatch.setenv("ADMIN_PASSWORD_HASH", hash_password("s3cret-pass"))
    core_config.get_settings.cache_clear()
    svc = AuthService(core_config.get_settings())

    assert svc.login("admin", "s3cret-pass").token == "sample-jwt-token"
    with pytest.raises(InvalidCredentialsError):
        svc.login("admin", "admin123")
    with pytest.raises(InvalidCredentialsError):
        svc.login("root", "s3cret-pass")


def test_verify_password_handles_garbage_hash():
    assert verify_password("x", "not-a-hash") is False
    assert verify_password("x", None) is False


def test_token_enforcement_is_off_by_default(env):
    AuthService(core_config.get_settings()).authorize(None)


def test_mutations_require_bearer_token_when_enabled(env, monkeypatch):
    monkeypatch.setenv("AUTH_REQUIRED", "1")
    monkeypatch.setenv("ADMIN_TOKEN", "tok-123")
    core_config.get_settings.cache_clear()

    with pytest.raises(TokenInvalidError):
        AuthService(core_config.get_settings()).authorize("Bearer wrong")

    with TestClient(create_app()) as client:
        assert client.get("/api/news").status_code == 200
        denied = client.post("/api/news", json={"content": "x"})
        assert denied.status_code == 401
        assert denied.json() == {"message": "Authentication required"}

        login = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"}).json()
        headers = {"Authorization": f"Bearer {login['token']}"}
        assert client.post("/api/news", json={"content": "x"}, headers=headers).status_code == 201
        assert client.delete("/api/core-service-carousel/images", headers=headers).status_code == 200
