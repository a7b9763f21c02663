"""Verbatim storage of uploaded files under the uploads directory."""
from __future__ import annotations

import logging
import os
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from fastapi import UploadFile

from .errors import ValidationError

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads"
MAX_FILES_PER_REQUEST = 10


@dataclass
class StoredUpload:
    filename: str
    url: str
    original_name: str


def present(files: Iterable[UploadFile | None] | None) -> list[UploadFile]:
    """Drop empty multipart parts (browsers send a nameless part for an empty file input)."""
    return [f for f in (files or []) if f is not None and f.filename]


class UploadStore:
    def __init__(self, uploads_dir: str | Path) -> None:
        self.uploads_dir = Path(uploads_dir)
        self.uploads_dir.mkdir(parents=True, exist_ok=True)

    def _unique_name(self, field: str, original: str) -> str:
        suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        ext = os.path.splitext(original or "")[1]
        return f"{field}-{suffix}{ext}"

    def url_for(self, filename: str) -> str:
        return f"{UPLOADS_URL_PREFIX}/{filename}"

    async def save(self, field: str, upload: UploadFile) -> StoredUpload:
        filename = self._unique_name(field, upload.filename or "")
        data = await upload.read()
        (self.uploads_dir / filename).write_bytes(data)
        logger.info("Stored upload %s (%d bytes) as %s", upload.filename, len(data), filename)
        return StoredUpload(filename=filename, url=self.url_for(filename), original_name=upload.filename or "")

    async def save_many(
        self, field: str, uploads: Iterable[UploadFile | None] | None, *, limit: int = MAX_FILES_PER_REQUEST
    ) -> list[StoredUpload]:
        files = present(uploads)
        if len(files) > limit:
            raise ValidationError(f"At most {limit} files may be uploaded at once")
        return [await self.save(field, f) for f in files]

    def delete(self, filename: str | None) -> bool:
        """Best-effort removal; failures are logged, never raised."""
        if not filename:
            return False
        path = self.uploads_dir / Path(filename).name
        try:
            if path.exists():
                path.unlink()
                return True
        except OSError:
            logger.exception("Error deleting physical file %s", path)
        return False
