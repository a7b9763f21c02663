"""Document store backed by SQLAlchemy (one row per document)."""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from xuelong.db.create_tables import create_all
from xuelong.db.models import Document
from xuelong.db.session import get_session

from .base import DocumentStore

logger = logging.getLogger(__name__)


class SQLDocumentStore(DocumentStore):
    """Drop-in replacement for ``JSONDocumentStore`` using the ``documents`` table."""

    def __init__(self, *, create_tables: bool = True) -> None:
        if create_tables:
            create_all()

    def exists(self, name: str) -> bool:
        with get_session() as session:
            return session.get(Document, name) is not None

    def load(self, name: str, default: Any) -> Any:
        try:
            with get_session() as session:
                entity = session.get(Document, name)
                if entity is None or entity.data is None:
                    return default
                return entity.data
        except SQLAlchemyError:
            logger.exception("Error loading document %s", name)
            return default

    def save(self, name: str, data: Any) -> None:
        with get_session() as session:
            session.merge(Document(name=name, data=data))
            session.commit()
