"""Homepage core-service carousel: settings plus an ordered image list."""
from __future__ import annotations

import uuid
from typing import Any

from xuelong.core.utils import now_iso, pick
from xuelong.repositories import DocumentMirror

from .errors import NotFoundError
from .upload_service import StoredUpload, UploadStore


class CarouselService:
    def __init__(self, mirror: DocumentMirror, uploads: UploadStore) -> None:
        self.mirror = mirror
        self.uploads = uploads

    def get(self) -> dict:
        with self.mirror.reading() as carousel:
            return carousel

    def update_settings(self, payload: dict[str, Any]) -> dict:
        with self.mirror.transaction() as carousel:
            carousel["title"] = pick(payload.get("title"), carousel.get("title"))
            carousel["interval"] = pick(payload.get("interval"), carousel.get("interval"))
            for key in ("isActive", "autoPlay"):
                if payload.get(key) is not None:
                    carousel[key] = payload[key]
            carousel["updatedAt"] = now_iso()
            return carousel

    def add_images(self, stored: list[StoredUpload]) -> list[dict]:
        added = [
            {
                "id": uuid.uuid4().hex,
                "url": item.url,
                "filename": item.filename,
                "originalName": item.original_name,
                "uploadedAt": now_iso(),
            }
            for item in stored
        ]
        with self.mirror.transaction() as carousel:
            carousel["images"] = [*(carousel.get("images") or []), *added]
            carousel["updatedAt"] = now_iso()
        return added

    def remove_image(self, image_id: str) -> dict:
        with self.mirror.transaction() as carousel:
            images = carousel.get("images") or []
            for index, image in enumerate(images):
                # Legacy documents hold numeric ids; compare as strings.
                if str(image.get("id")) == str(image_id):
                    removed = images.pop(index)
                    break
            else:
                raise NotFoundError("Image not found")
            carousel["updatedAt"] = now_iso()
        self.uploads.delete(removed.get("filename"))
        return carousel

    def clear_images(self) -> dict:
        with self.mirror.transaction() as carousel:
            removed = carousel.get("images") or []
            carousel["images"] = []
            carousel["updatedAt"] = now_iso()
        for image in removed:
            self.uploads.delete(image.get("filename"))
        return carousel
