"""
Services catalog (the "core services" shown on the homepage) and poster images.

A service's ``templateType`` decides which poster field is live:
multi-image templates keep an ordered ``posterImages`` list and a null
``posterImage``; every other template keeps a single ``posterImage`` and an
empty ``posterImages``.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from xuelong.core.utils import now_iso, pick
from xuelong.repositories import DocumentMirror, IdSequence
from xuelong.repositories.defaults import SERVICES

from .errors import NotFoundError, ValidationError

DEFAULT_TEMPLATE = "vertical"
MULTI_IMAGE_TEMPLATES = frozenset({"vertical", "horizontal", "grid"})


def is_multi_image(template_type: str | None) -> bool:
    return (template_type or DEFAULT_TEMPLATE) in MULTI_IMAGE_TEMPLATES


def parse_existing_images(raw: Optional[str]) -> Optional[list[str]]:
    """
    Decode the ``existingImages`` form field.

    Returns None when the field was not sent. Anything other than a JSON
    array of strings is rejected.
    """
    if raw is None:
        return None
    if not raw.strip():
        return []
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise ValidationError("existingImages must be a JSON array of image URLs") from exc
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationError("existingImages must be a JSON array of image URLs")
    return value


def apply_posters(service: dict, existing: list[str], new_urls: list[str]) -> None:
    """Set the live poster field for the service's template and clear the other one."""
    if is_multi_image(service.get("templateType")):
        service["posterImages"] = [*existing, *new_urls]
        service["posterImage"] = None
    else:
        candidates = [*new_urls, *existing]
        service["posterImage"] = candidates[0] if candidates else None
        service["posterImages"] = []


def coerce_order(value: Any) -> int | float:
    """Accept numbers and numeric strings for ``order``; anything else is a 400."""
    if isinstance(value, bool):
        raise ValidationError("order must be a number")
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(str(value).strip())
    except ValueError as exc:
        raise ValidationError("order must be a number") from exc
    return int(number) if number.is_integer() else number


def order_key(service: dict) -> int | float:
    try:
        return coerce_order(service.get("order") or 0)
    except ValidationError:
        return 0


def poster_url(service: dict) -> Optional[str]:
    images = service.get("posterImages") or []
    return service.get("posterImage") or (images[0] if images else None)


def current_images(service: dict) -> list[str]:
    if is_multi_image(service.get("templateType")):
        return list(service.get("posterImages") or [])
    single = service.get("posterImage")
    return [single] if single else []


class ServiceCatalog:
    """CRUD for the services document plus the poster sub-resource."""

    def __init__(self, mirror: DocumentMirror, ids: IdSequence) -> None:
        self.mirror = mirror
        self.ids = ids

    def _find(self, items: list[dict], service_id: int) -> dict:
        for item in items:
            if item.get("id") == service_id:
                return item
        raise NotFoundError("Service not found")

    def list(self) -> list[dict]:
        with self.mirror.reading() as items:
            return sorted(items, key=order_key)

    def get(self, service_id: int) -> dict:
        with self.mirror.reading() as items:
            return self._find(items, service_id)

    def create(self, payload: dict[str, Any]) -> dict:
        title = payload.get("title")
        if isinstance(title, str):
            title = title.strip()
        if not title:
            raise ValidationError("Title is required")
        with self.mirror.transaction() as items:
            service = {
                "id": self.ids.next(SERVICES, (s.get("id") for s in items)),
                "title": title,
                "description": payload.get("description"),
                "icon": payload.get("icon"),
                "templateType": payload.get("templateType") or DEFAULT_TEMPLATE,
                "features": payload.get("features") or [],
                "posterImage": None,
                "posterImages": [],
                "isActive": payload["isActive"] if payload.get("isActive") is not None else True,
                "order": coerce_order(payload["order"]) if payload.get("order") is not None else len(items) + 1,
                "createdAt": now_iso(),
            }
            initial = list(payload.get("posterImages") or [])
            if payload.get("posterImage"):
                initial.insert(0, payload["posterImage"])
            apply_posters(service, initial, [])
            items.append(service)
            return service

    def update(self, service_id: int, payload: dict[str, Any]) -> dict:
        with self.mirror.transaction() as items:
            service = self._find(items, service_id)
            for key in ("title", "description", "icon", "templateType"):
                service[key] = pick(payload.get(key), service.get(key))
            if payload.get("features") is not None:
                service["features"] = list(payload["features"])
            if payload.get("isActive") is not None:
                service["isActive"] = payload["isActive"]
            if payload.get("order") is not None:
                service["order"] = coerce_order(payload["order"])
            service["updatedAt"] = now_iso()
            return service

    def delete(self, service_id: int) -> None:
        with self.mirror.transaction() as items:
            items.remove(self._find(items, service_id))

    def update_posters(
        self,
        service_id: int,
        existing: Optional[list[str]],
        new_urls: list[str],
        *,
        append: bool = False,
    ) -> dict:
        """
        Replace the service's poster set with ``existing ++ new_urls``.

        ``existing`` is the client's list of images to keep. When it was not
        sent at all, ``append`` keeps whatever the service currently holds;
        otherwise the kept list is empty.
        """
        with self.mirror.transaction() as items:
            service = self._find(items, service_id)
            if existing is None:
                existing = current_images(service) if append else []
            service.setdefault("templateType", DEFAULT_TEMPLATE)
            apply_posters(service, existing, new_urls)
            service["updatedAt"] = now_iso()
            return service

    def stats(self) -> tuple[int, int]:
        with self.mirror.reading() as items:
            return len(items), sum(1 for s in items if s.get("isActive"))
