from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from .deps import get_services, require_admin

router = APIRouter(prefix="/api", tags=["news"])


@router.get("/news")
def news_ticker(request: Request, includeInactive: bool = False):
    return get_services(request).news.ticker(include_inactive=includeInactive)


@router.get("/news/{news_id}")
def get_news_item(news_id: int, request: Request):
    return get_services(request).news.get(news_id)


@router.post("/news", status_code=201, dependencies=[Depends(require_admin)])
def create_news_item(payload: dict, request: Request):
    return get_services(request).news.create(payload)


@router.put("/news/{news_id}", dependencies=[Depends(require_admin)])
def update_news_item(news_id: int, payload: dict, request: Request):
    return get_services(request).news.update(news_id, payload)


@router.delete("/news/{news_id}", dependencies=[Depends(require_admin)])
def delete_news_item(news_id: int, request: Request):
    get_services(request).news.delete(news_id)
    return {"message": "News item deleted successfully"}


@router.get("/news-settings")
def get_news_settings(request: Request):
    return get_services(request).news.settings()


@router.put("/news-settings", dependencies=[Depends(require_admin)])
def update_news_settings(payload: dict, request: Request):
    return get_services(request).news.update_settings(payload)
