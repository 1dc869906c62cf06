"""Sizing and building of IVFFlat indexes on a collection's vector column."""

from __future__ import annotations

import logging
import math
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from zepkit.models import StorageError

INDEX_TIMEOUT = 60 * 60.0
EMBEDDING_COL_NAME = "embedding"
# Below this many rows an index is not worth building unless forced.
MIN_ROWS_FOR_INDEX = 10_000
DEFAULT_DISTANCE_FUNCTION = "cosine"

_log = logging.getLogger(__name__)

_index_locks: dict[str, threading.Lock] = {}
_index_locks_guard = threading.Lock()


def _collection_lock(name: str) -> threading.Lock:
    with _index_locks_guard:
        return _index_locks.setdefault(name, threading.Lock())


@dataclass
class DocumentCollection:
    """A document collection and the state of its vector index."""

    name: str
    table_name: str
    distance_function: str = DEFAULT_DISTANCE_FUNCTION
    embedding_dimensions: int = 0
    description: str = ""
    metadata: dict[str, Any] | None = None
    is_indexed: bool = False
    index_type: str = "ivfflat"
    list_count: int = 0
    probe_count: int = 0


class IndexBackend(ABC):
    """The storage operations the indexer needs."""

    @abstractmethod
    def count_rows(self, table_name: str) -> int:
        """Number of rows in ``table_name``."""

    @abstractmethod
    def drop_index(self, index_name: str, timeout: float) -> None:
        """Drop ``index_name`` if it exists."""

    @abstractmethod
    def create_index(
        self,
        table_name: str,
        column: str,
        index_name: str,
        list_count: int,
        timeout: float,
    ) -> None:
        """Build an IVFFlat cosine index with ``list_count`` lists."""

    @abstractmethod
    def get_collection(self, name: str) -> DocumentCollection:
        """Return the stored collection named ``name``."""

    @abstractmethod
    def update_collection(self, collection: DocumentCollection) -> None:
        """Store ``collection``."""


class VectorColIndex:
    """Index parameters for one collection's vector column."""

    def __init__(
        self,
        backend: IndexBackend,
        collection: DocumentCollection,
        col_name: str = EMBEDDING_COL_NAME,
    ) -> None:
        self.backend = backend
        self.collection = collection
        self.col_name = col_name
        self.row_count = 0
        self.list_count = 0
        self.probe_count = 0

    def count_rows(self) -> None:
        """Set ``row_count`` from the collection's table."""
        try:
            self.row_count = self.backend.count_rows(self.collection.table_name)
        except Exception as exc:
            raise StorageError("error counting rows", exc) from exc

    def calculate_list_count(self) -> None:
        """Set ``list_count`` from ``row_count``."""
        if self.row_count <= 0:
            raise ValueError("rows must be greater than 0")
        if self.row_count <= 1000:
            self.list_count = 1
        elif self.row_count <= 1_000_000:
            self.list_count = self.row_count // 1000
        else:
            self.list_count = math.isqrt(self.row_count)

    def calculate_probes(self) -> None:
        """Set ``probe_count`` to the square root of ``list_count``."""
        if self.list_count <= 0:
            raise ValueError("lists must be greater than 0")
        self.probe_count = math.isqrt(self.list_count)

    @property
    def index_name(self) -> str:
        return f"{self.collection.table_name}_{self.col_name}_idx"

    def create_index(self, force: bool) -> threading.Thread:
        """Start building the index in the background and return the worker thread.

        Only one build per collection runs at a time. Without ``force`` the
        collection needs at least MIN_ROWS_FOR_INDEX rows.
        """
        lock = _collection_lock(self.collection.name)
        lock.acquire()
        try:
            if self.collection.distance_function != "cosine":
                raise ValueError("only cosine distance function is currently supported")
            if not force and self.row_count < MIN_ROWS_FOR_INDEX:
                raise ValueError("not enough rows to create index")
            worker = threading.Thread(
                target=self._build, args=(lock,), daemon=True
            )
            worker.start()
        except BaseException:
            lock.release()
            raise
        return worker

    def _build(self, lock: threading.Lock) -> None:
        try:
            try:
                self.backend.drop_index(self.index_name, INDEX_TIMEOUT)
            except Exception:
                _log.exception("error dropping index")
                return
            _log.info("Starting index creation on %s", self.collection.name)
            try:
                self.backend.create_index(
                    self.collection.table_name,
                    self.col_name,
                    self.index_name,
                    self.list_count,
                    INDEX_TIMEOUT,
                )
            except Exception:
                _log.exception("error creating index")
                return
            try:
                collection = self.backend.get_collection(self.collection.name)
            except Exception:
                _log.exception("error getting collection")
                return
            collection.is_indexed = True
            collection.probe_count = self.probe_count
            collection.list_count = self.list_count
            try:
                self.backend.update_collection(collection)
            except Exception:
                _log.exception("error updating collection")
                return
            _log.info("Index creation on %s completed successfully", collection.name)
        finally:
            lock.release()


def new_vector_col_index(
    backend: IndexBackend, collection: DocumentCollection
) -> VectorColIndex:
    """Build a VectorColIndex with its row, list and probe counts filled in."""
    index = VectorColIndex(backend, collection)
    index.count_rows()
    index.calculate_list_count()
    index.calculate_probes()
    return index