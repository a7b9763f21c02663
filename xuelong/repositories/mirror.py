"""In-memory document mirrors and id allocation."""

from __future__ import annotations

import copy
import threading
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from .base import DocumentStore

SEQUENCES_DOCUMENT = "_sequences"


class DocumentMirror:
    """
    In-memory copy of one stored document.

    Reads may use ``data`` directly. Mutations go through ``transaction()``,
    which serializes writers, writes the whole document back on success and
    restores the previous state if the block or the write raises.
    """

    def __init__(self, store: DocumentStore, name: str, default: Any) -> None:
        self.store = store
        self.name = name
        self._lock = threading.RLock()
        existed = store.exists(name)
        self.data = store.load(name, copy.deepcopy(default))
        if not existed:
            store.save(name, self.data)

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        with self._lock:
            snapshot = copy.deepcopy(self.data)
            try:
                yield self.data
                self.store.save(self.name, self.data)
            except BaseException:
                self.data = snapshot
                raise

    @contextmanager
    def reading(self) -> Iterator[Any]:
        with self._lock:
            yield self.data


class IdSequence:
    """
    Monotonic integer ids per collection, persisted in ``_sequences``.

    ``next`` never hands out an id at or below the largest id seen, so ids are
    not reused after deletions (including across restarts).
    """

    def __init__(self, store: DocumentStore) -> None:
        self._mirror = DocumentMirror(store, SEQUENCES_DOCUMENT, {})

    def next(self, key: str, existing_ids: Iterable[Any] = ()) -> int:
        with self._mirror.transaction() as seqs:
            highest = max([int(seqs.get(key, 0))] + [i for i in existing_ids if isinstance(i, int)])
            seqs[key] = highest + 1
            return highest + 1

    def current(self, key: str) -> int:
        with self._mirror.reading() as seqs:
            return int(seqs.get(key, 0))
