"""Storage interface shared by the JSON and SQL backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DocumentStore(ABC):
    """Named JSON documents, each holding a single object or an array."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    @abstractmethod
    def load(self, name: str, default: Any) -> Any:
        """Return the stored document, or ``default`` when it is missing or unreadable."""

    @abstractmethod
    def save(self, name: str, data: Any) -> None:
        """Replace the whole document."""
