"""
FastAPI routers grouped by content area (services, carousel, news, posts, ...).

Each module exposes an ``APIRouter`` included by ``app_factory.create_app``.
Routers resolve services from ``request.app.state`` via ``deps.get_services``.
"""
