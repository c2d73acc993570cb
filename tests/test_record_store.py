"""Tests for the record stores and store selection."""

import pytest

from app.core.exceptions import StorageFailure
from app.storage import MemoryRecordStore, create_record_store
from app.storage.firestore import FirestoreRecordStore


class TestMemoryRecordStore:

    def test_get_missing_returns_none(self, store):
        assert store.get("issues", "nope") is None

    def test_put_then_get(self, store):
        store.put("issues", "a", {"id": "a", "title": "x"})
        assert store.get("issues", "a") == {"id": "a", "title": "x"}

    def test_returned_records_are_copies(self, store):
        store.put("issues", "a", {"id": "a", "tags": ["x"]})
        record = store.get("issues", "a")
        record["tags"].append("y")
        record["title"] = "changed"
        assert store.get("issues", "a") == {"id": "a", "tags": ["x"]}

    def test_put_copies_input(self, store):
        record = {"id": "a", "status": "new"}
        store.put("issues", "a", record)
        record["status"] = "closed"
        assert store.get("issues", "a")["status"] == "new"

    def test_delete_reports_existence(self, store):
        store.put("issues", "a", {"id": "a"})
        assert store.delete("issues", "a") is True
        assert store.delete("issues", "a") is False
        assert store.get("issues", "a") is None

    def test_list_with_where_and_predicate(self, store):
        store.put("issues", "a", {"id": "a", "state": "kerala", "n": 1})
        store.put("issues", "b", {"id": "b", "state": "kerala", "n": 5})
        store.put("issues", "c", {"id": "c", "state": "goa", "n": 9})

        kerala = store.list("issues", where={"state": "kerala"})
        assert sorted(r["id"] for r in kerala) == ["a", "b"]

        big = store.list("issues", predicate=lambda r: r["n"] > 3)
        assert sorted(r["id"] for r in big) == ["b", "c"]

        both = store.list("issues", where={"state": "kerala"}, predicate=lambda r: r["n"] > 3)
        assert [r["id"] for r in both] == ["b"]

    def test_list_ignores_none_filters(self, store):
        store.put("issues", "a", {"id": "a", "state": "kerala"})
        assert len(store.list("issues", where={"state": None, "district": None})) == 1

    def test_list_ignores_empty_filters(self, store):
        store.put("issues", "a", {"id": "a", "state": "kerala"})
        assert len(store.list("issues", where={"state": "", "district": ""})) == 1

    def test_collections_are_isolated(self, store):
        store.put("issues", "a", {"id": "a"})
        assert store.list("comments") == []
        assert store.get("comments", "a") is None

    def test_ping(self, store):
        store.put("issues", "a", {"id": "a"})
        assert store.ping() == {"connected": True, "collections_count": 1}


class TestCreateRecordStore:

    def test_memory_backend(self):
        assert isinstance(create_record_store("memory"), MemoryRecordStore)
        assert isinstance(create_record_store(" Memory "), MemoryRecordStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError) as exc_info:
            create_record_store("postgres")
        assert "Unknown STORAGE_BACKEND" in str(exc_info.value)


class FakeSnapshot:

    def __init__(self, data):
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data)


class FakeDocument:

    def __init__(self, docs, key):
        self.docs = docs
        self.key = key

    def get(self):
        return FakeSnapshot(self.docs.get(self.key))

    def set(self, record):
        self.docs[self.key] = dict(record)

    def delete(self):
        self.docs.pop(self.key, None)


class FakeQuery:

    def __init__(self, docs, clauses=()):
        self.docs = docs
        self.clauses = list(clauses)

    def where(self, field_path, op_string, value):
        assert op_string == "=="
        return FakeQuery(self.docs, self.clauses + [(field_path, value)])

    def stream(self):
        for data in self.docs.values():
            if all(data.get(field) == value for field, value in self.clauses):
                yield FakeSnapshot(data)


class FakeCollection(FakeQuery):

    def document(self, key):
        return FakeDocument(self.docs, key)


class FakeFirestoreClient:

    def __init__(self):
        self.data = {}

    def collection(self, name):
        return FakeCollection(self.data.setdefault(name, {}))

    def collections(self):
        return list(self.data)


class BrokenFirestoreClient:

    def collection(self, name):
        raise RuntimeError("deadline exceeded")


class TestFirestoreRecordStore:

    def test_round_trip_and_delete(self):
        store = FirestoreRecordStore(client=FakeFirestoreClient())
        store.put("issues", "a", {"id": "a", "state": "kerala"})

        assert store.get("issues", "a") == {"id": "a", "state": "kerala"}
        assert store.delete("issues", "a") is True
        assert store.delete("issues", "a") is False
        assert store.get("issues", "a") is None

    def test_list_pushes_down_equality_filters(self):
        store = FirestoreRecordStore(client=FakeFirestoreClient())
        store.put("issues", "a", {"id": "a", "state": "kerala", "status": "new"})
        store.put("issues", "b", {"id": "b", "state": "goa", "status": "new"})
        store.put("issues", "c", {"id": "c", "state": "kerala", "status": "closed"})

        kerala = store.list("issues", where={"state": "kerala", "status": None, "district": ""})
        assert sorted(r["id"] for r in kerala) == ["a", "c"]

        open_kerala = store.list("issues", where={"state": "kerala"}, predicate=lambda r: r["status"] != "closed")
        assert [r["id"] for r in open_kerala] == ["a"]

    def test_errors_become_storage_failures(self):
        store = FirestoreRecordStore(client=BrokenFirestoreClient())
        with pytest.raises(StorageFailure):
            store.get("issues", "a")
        with pytest.raises(StorageFailure):
            store.list("issues")
