from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from xuelong.core.rate_limiter import rate_limit_ip
from xuelong.services.auth_service import InvalidCredentialsError

from .deps import get_services

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(payload: dict, request: Request):
    rate_limit_ip(request, "auth:login", limit=10, window_seconds=300)
    try:
        result = get_services(request).auth.login(payload.get("username"), payload.get("password"))
    except InvalidCredentialsError:
        raise HTTPException(401, "Invalid credentials")
    return {"token": result.token, "user": result.user}


@router.post("/logout")
def logout():
    return {"message": "Logged out successfully"}
