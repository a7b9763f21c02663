"""Request-scoped accessors shared by the routers."""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, Request

from xuelong.services import Services
from xuelong.services.auth_service import TokenInvalidError


def get_services(request: Request) -> Services:
    svc = getattr(getattr(request.app, "state", None), "services", None)
    if not svc:
        raise RuntimeError("Services not configured")
    return svc


def require_admin(request: Request, authorization: Optional[str] = Header(None)) -> None:
    try:
        get_services(request).auth.authorize(authorization)
    except TokenInvalidError as exc:
        raise HTTPException(401, str(exc)) from exc
