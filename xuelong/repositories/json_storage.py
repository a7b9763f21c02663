"""
JSON file persistence adapter.

One ``<name>.json`` file per document under the data directory, rewritten in
full (pretty-printed) on every save.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import logging

from .base import DocumentStore

logger = logging.getLogger(__name__)


class JSONDocumentStore(DocumentStore):
    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def load(self, name: str, default: Any) -> Any:
        path = self.path_for(name)
        if not path.exists():
            return default
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            logger.exception("Error loading data from %s", path)
            return default

    def save(self, name: str, data: Any) -> None:
        self.path_for(name).write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
