"""Application factory: settings, storage, services, routers and error handlers."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from xuelong.core.config import Settings, get_settings
from xuelong.core.logging_config import setup_logging
from xuelong.repositories import DocumentStore, build_store
from xuelong.routers import auth as auth_router
from xuelong.routers import carousel as carousel_router
from xuelong.routers import catalog as catalog_router
from xuelong.routers import news as news_router
from xuelong.routers import posts as posts_router
from xuelong.routers import resources as resources_router
from xuelong.routers import site_info as site_info_router
from xuelong.routers import system as system_router
from xuelong.services import build_services
from xuelong.services.errors import ContentError

logger = logging.getLogger(__name__)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ContentError)
    async def content_error_handler(request: Request, exc: ContentError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
            for err in exc.errors()
        ]
        first = errors[0] if errors else {"loc": [], "msg": "Invalid request"}
        message = f"{'.'.join(first['loc'])}: {first['msg']}" if first["loc"] else first["msg"]
        return JSONResponse(status_code=400, content={"message": message, "errors": errors})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == 404 and message == "Not Found":
            message = "Route not found"
        return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Something went wrong!"})


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``) and the tests."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    store = store or build_store(settings)
    services = build_services(settings, store)

    app = FastAPI(title="XUELONG AI API")
    app.state.settings = settings
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins) or ["*"],
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    uploads = StaticFiles(directory=str(services.uploads.uploads_dir))
    app.mount("/api/uploads", uploads, name="api-uploads")
    app.mount("/uploads", uploads, name="uploads")

    app.include_router(system_router.router)
    app.include_router(auth_router.router)
    app.include_router(site_info_router.router)
    app.include_router(resources_router.router)
    app.include_router(catalog_router.router)
    app.include_router(carousel_router.router)
    app.include_router(news_router.router)
    app.include_router(posts_router.router)

    _install_error_handlers(app)
    logger.info(
        "XUELONG AI API ready (storage=%s, data=%s, uploads=%s)",
        settings.storage_backend,
        settings.data_dir,
        settings.uploads_dir,
    )
    return app
