"""News ticker items and display settings."""
from __future__ import annotations

from typing import Any

from xuelong.core.utils import now_iso
from xuelong.repositories import DocumentMirror, IdSequence
from xuelong.repositories.defaults import NEWS

from .errors import NotFoundError, ValidationError

SETTINGS_KEYS = ("scrollSpeed", "maxDisplayItems", "autoRefresh", "refreshInterval", "animationDelay")
ITEM_KEYS = ("content", "icon", "type", "priority", "isActive")


def _priority(item: dict) -> float:
    value = item.get("priority")
    return value if isinstance(value, (int, float)) else float("inf")


class NewsService:
    def __init__(self, mirror: DocumentMirror, ids: IdSequence) -> None:
        self.mirror = mirror
        self.ids = ids

    def _items(self, doc: dict) -> list[dict]:
        return doc.setdefault("news", [])

    def _find(self, doc: dict, news_id: int) -> dict:
        for item in self._items(doc):
            if item.get("id") == news_id:
                return item
        raise NotFoundError("News item not found")

    def ticker(self, *, include_inactive: bool = False) -> dict:
        """Active items by ascending priority, capped at ``maxDisplayItems``."""
        with self.mirror.reading() as doc:
            settings = doc.get("settings") or {}
            items = self._items(doc)
            if include_inactive:
                return {"news": sorted(items, key=_priority), "settings": settings}
            active = sorted((i for i in items if i.get("isActive") is True), key=_priority)
            limit = settings.get("maxDisplayItems")
            if isinstance(limit, int):
                active = active[: max(limit, 0)]
            return {"news": active, "settings": settings}

    def get(self, news_id: int) -> dict:
        with self.mirror.reading() as doc:
            return self._find(doc, news_id)

    def create(self, payload: dict[str, Any]) -> dict:
        if not payload.get("content"):
            raise ValidationError("Content is required")
        with self.mirror.transaction() as doc:
            items = self._items(doc)
            item = {
                "id": self.ids.next(NEWS, (i.get("id") for i in items)),
                "content": payload["content"],
                "type": payload.get("type") or "general",
                "priority": payload.get("priority") or len(items) + 1,
                "isActive": payload["isActive"] if payload.get("isActive") is not None else True,
                "createdAt": now_iso(),
            }
            if payload.get("icon") is not None:
                item["icon"] = payload["icon"]
            items.append(item)
            return item

    def update(self, news_id: int, payload: dict[str, Any]) -> dict:
        with self.mirror.transaction() as doc:
            item = self._find(doc, news_id)
            for key in ITEM_KEYS:
                if payload.get(key) is not None:
                    item[key] = payload[key]
            item["updatedAt"] = now_iso()
            return item

    def delete(self, news_id: int) -> None:
        with self.mirror.transaction() as doc:
            self._items(doc).remove(self._find(doc, news_id))

    def settings(self) -> dict:
        with self.mirror.reading() as doc:
            return doc.get("settings") or {}

    def update_settings(self, payload: dict[str, Any]) -> dict:
        with self.mirror.transaction() as doc:
            settings = doc.setdefault("settings", {})
            for key in SETTINGS_KEYS:
                if payload.get(key) is not None:
                    settings[key] = payload[key]
            return settings
