"""
Persistence adapters.

Services depend on the ``DocumentStore`` interface and on ``DocumentMirror``
rather than touching files or sessions directly; ``build_store`` picks the
JSON or SQL backend from settings.
"""

from .base import DocumentStore
from .json_storage import JSONDocumentStore
from .mirror import DocumentMirror, IdSequence


def build_store(settings) -> DocumentStore:
    if settings.storage_backend == "sql":
        from .sql_repository import SQLDocumentStore

        return SQLDocumentStore()
    return JSONDocumentStore(settings.data_dir)


__all__ = ["DocumentStore", "JSONDocumentStore", "DocumentMirror", "IdSequence", "build_store"]
