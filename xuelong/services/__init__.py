"""
Use cases for the XUELONG AI API.

Each service module works on ``DocumentMirror``s handed to it by
``build_services`` and raises ``ContentError`` subclasses; routers call
these services instead of touching stored documents directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from xuelong.core.config import Settings
from xuelong.repositories import DocumentMirror, DocumentStore, IdSequence
from xuelong.repositories import defaults

from .auth_service import AuthService
from .carousel_service import CarouselService
from .catalog_service import ServiceCatalog
from .collection_service import AIResourceService, PartnerService
from .news_service import NewsService
from .post_service import PostService
from .site_info_service import SiteInfoService
from .upload_service import UploadStore


@dataclass
class Services:
    uploads: UploadStore
    auth: AuthService
    site_info: SiteInfoService
    catalog: ServiceCatalog
    carousel: CarouselService
    news: NewsService
    posts: PostService
    ai_resources: AIResourceService
    partners: PartnerService


def build_services(settings: Settings, store: DocumentStore) -> Services:
    """Load every document into its mirror and wire the services around them."""
    ids = IdSequence(store)
    uploads = UploadStore(settings.uploads_dir)

    def mirror(name, default):
        return DocumentMirror(store, name, default)

    return Services(
        uploads=uploads,
        auth=AuthService(settings),
        site_info=SiteInfoService(
            mirror(defaults.COMPANY, defaults.DEFAULT_COMPANY),
            mirror(defaults.FOUNDER, defaults.DEFAULT_FOUNDER),
            mirror(defaults.INTRO, defaults.DEFAULT_INTRO),
        ),
        catalog=ServiceCatalog(mirror(defaults.SERVICES, defaults.DEFAULT_SERVICES), ids),
        carousel=CarouselService(mirror(defaults.CAROUSEL, defaults.DEFAULT_CAROUSEL), uploads),
        news=NewsService(mirror(defaults.NEWS, defaults.DEFAULT_NEWS), ids),
        posts=PostService(mirror(defaults.POSTS, defaults.DEFAULT_POSTS), ids),
        ai_resources=AIResourceService(mirror(defaults.AI_RESOURCES, defaults.DEFAULT_AI_RESOURCES), ids),
        partners=PartnerService(mirror(defaults.PARTNERS, defaults.DEFAULT_PARTNERS), ids),
    )
