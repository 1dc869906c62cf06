import dataclasses

import pytest

from zepkit.indexer import (
    DocumentCollection,
    IndexBackend,
    VectorColIndex,
    new_vector_col_index,
)
from zepkit.models import StorageError


class FakeBackend(IndexBackend):
    def __init__(self, rows=500, fail_create=False, fail_count=False):
        self.rows = rows
        self.fail_create = fail_create
        self.fail_count = fail_count
        self.collections = {}
        self.calls = []

    def count_rows(self, table_name):
        if self.fail_count:
            raise RuntimeError("boom")
        return self.rows

    def drop_index(self, index_name, timeout):
        self.calls.append(("drop", index_name))

    def create_index(self, table_name, column, index_name, list_count, timeout):
        if self.fail_create:
            raise RuntimeError("boom")
        self.calls.append(("create", table_name, column, index_name, list_count))

    def get_collection(self, name):
        return dataclasses.replace(self.collections[name])

    def update_collection(self, collection):
        self.collections[collection.name] = collection


def _collection(name="testcollection", distance="cosine"):
    return DocumentCollection(
        name=name, table_name=f"docstore_{name}_384", distance_function=distance
    )


def _index(**kwargs):
    return VectorColIndex(FakeBackend(), _collection(), **kwargs)


def test_calculate_list_count_medium():
    vci = _index()
    vci.row_count = 500_000
    vci.calculate_list_count()
    assert vci.list_count == 500


def test_calculate_list_count_large():
    vci = _index()
    vci.row_count = 2_000_000
    vci.calculate_list_count()
    assert vci.list_count == 1414


def test_calculate_list_count_small():
    vci = _index()
    vci.row_count = 1000
    vci.calculate_list_count()
    assert vci.list_count == 1


def test_calculate_list_count_requires_rows():
    vci = _index()
    with pytest.raises(ValueError, match="rows must be greater than 0"):
        vci.calculate_list_count()


def test_calculate_probes():
    vci = _index()
    vci.list_count = 1000
    vci.calculate_probes()
    assert vci.probe_count == 31


def test_calculate_probes_requires_lists():
    vci = _index()
    with pytest.raises(ValueError, match="lists must be greater than 0"):
        vci.calculate_probes()


def test_new_vector_col_index_fills_counts():
    vci = new_vector_col_index(FakeBackend(rows=500), _collection())
    assert (vci.row_count, vci.list_count, vci.probe_count) == (500, 1, 1)
    assert vci.col_name == "embedding"


def test_count_rows_wraps_backend_errors():
    with pytest.raises(StorageError, match="error counting rows"):
        new_vector_col_index(FakeBackend(fail_count=True), _collection())


def test_create_index_marks_collection_indexed():
    backend = FakeBackend(rows=500)
    collection = _collection("created")
    backend.collections[collection.name] = collection
    vci = new_vector_col_index(backend, collection)

    worker = vci.create_index(True)
    worker.join(timeout=5)

    assert not worker.is_alive()
    stored = backend.collections["created"]
    assert stored.is_indexed is True
    assert stored.probe_count > 0
    assert stored.list_count > 0
    assert backend.calls == [
        ("drop", "docstore_created_384_embedding_idx"),
        ("create", "docstore_created_384", "embedding", "docstore_created_384_embedding_idx", 1),
    ]


def test_create_index_without_force_needs_enough_rows():
    backend = FakeBackend(rows=500)
    collection = _collection("small")
    backend.collections[collection.name] = collection
    vci = new_vector_col_index(backend, collection)
    with pytest.raises(ValueError, match="not enough rows to create index"):
        vci.create_index(False)
    # The collection lock must have been released.
    worker = vci.create_index(True)
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert backend.collections["small"].is_indexed is True


def test_create_index_rejects_other_distance_functions():
    backend = FakeBackend(rows=500)
    vci = new_vector_col_index(backend, _collection("l2coll", distance="l2"))
    with pytest.raises(ValueError, match="only cosine"):
        vci.create_index(True)


def test_create_index_failure_leaves_collection_unindexed():
    backend = FakeBackend(rows=500, fail_create=True)
    collection = _collection("failing")
    backend.collections[collection.name] = collection
    vci = new_vector_col_index(backend, collection)

    worker = vci.create_index(True)
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert backend.collections["failing"].is_indexed is False
    backend.fail_create = False
    second = vci.create_index(True)
    second.join(timeout=5)
    assert backend.collections["failing"].is_indexed is True