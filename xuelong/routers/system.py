"""Health check, contact form and admin dashboard counters."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from xuelong.core.utils import now_iso

from .deps import get_services

router = APIRouter(prefix="/api", tags=["system"])
logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "service", "message")


@router.get("/health")
def health():
    return {"status": "OK", "message": "XUELONG AI Server is running"}


@router.post("/contact")
def contact(payload: dict):
    submission = {key: payload.get(key) for key in CONTACT_FIELDS}
    if not submission["name"] or not submission["message"]:
        raise HTTPException(400, "Name and message are required")
    submission["timestamp"] = now_iso()
    logger.info("Contact form submission: %s", submission)
    return {"message": "感谢您的留言，我们会尽快与您联系！"}


@router.get("/dashboard/stats")
def dashboard_stats(request: Request):
    services = get_services(request)
    total_services, active_services = services.catalog.stats()
    return {
        "totalPosts": services.posts.count(),
        "totalPartners": services.partners.count(),
        "totalAiResources": services.ai_resources.count(),
        "totalServices": total_services,
        "activeAiResources": services.ai_resources.count(active_only=True),
        "activeServices": active_services,
    }
