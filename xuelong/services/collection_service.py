"""Plain list collections edited from the admin panel (AI resources, partners)."""
from __future__ import annotations

from typing import Any

from xuelong.core.utils import now_iso, pick
from xuelong.repositories import DocumentMirror, IdSequence

from .errors import NotFoundError, ValidationError


class CollectionService:
    """
    Generic CRUD over a JSON array of records with integer ids.

    Subclasses name the editable ``fields``, the ``required`` ones and the
    human ``label`` used in not-found messages.
    """

    label = "Item"
    fields: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    has_active_flag = False

    def __init__(self, mirror: DocumentMirror, ids: IdSequence) -> None:
        self.mirror = mirror
        self.ids = ids

    def _find(self, items: list[dict], item_id: int) -> dict:
        for item in items:
            if item.get("id") == item_id:
                return item
        raise NotFoundError(f"{self.label} not found")

    def list(self) -> list[dict]:
        with self.mirror.reading() as items:
            return list(items)

    def get(self, item_id: int) -> dict:
        with self.mirror.reading() as items:
            return self._find(items, item_id)

    def create(self, payload: dict[str, Any]) -> dict:
        missing = [key for key in self.required if not payload.get(key)]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
        with self.mirror.transaction() as items:
            record = {"id": self.ids.next(self.mirror.name, (i.get("id") for i in items))}
            record.update({key: payload.get(key) for key in self.fields})
            if self.has_active_flag:
                record["isActive"] = payload["isActive"] if payload.get("isActive") is not None else True
            record["createdAt"] = now_iso()
            items.append(record)
            return record

    def update(self, item_id: int, payload: dict[str, Any]) -> dict:
        with self.mirror.transaction() as items:
            record = self._find(items, item_id)
            for key in self.fields:
                record[key] = pick(payload.get(key), record.get(key))
            if self.has_active_flag and payload.get("isActive") is not None:
                record["isActive"] = payload["isActive"]
            record["updatedAt"] = now_iso()
            return record

    def delete(self, item_id: int) -> None:
        with self.mirror.transaction() as items:
            items.remove(self._find(items, item_id))

    def count(self, *, active_only: bool = False) -> int:
        with self.mirror.reading() as items:
            if active_only:
                return sum(1 for i in items if i.get("isActive"))
            return len(items)


class AIResourceService(CollectionService):
    label = "AI Resource"
    fields = ("name", "description", "category", "url")
    has_active_flag = True


class PartnerService(CollectionService):
    label = "Partner"
    fields = ("name", "description", "website", "logo")
    required = ("name",)
