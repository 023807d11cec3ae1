"""Tests for the JSON-file-backed product store."""

import json
import logging

import pytest

from shop.domain.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from shop.infrastructure.persistence.json_collection import JsonCollection
from shop.infrastructure.persistence.json_file import JsonFile
from shop.infrastructure.persistence.json_product_store import JsonProductStore


def _fields(code: str = "A1", **overrides) -> dict:
    fields = {
        "title": "Widget",
        "description": "d",
        "code": code,
        "price": 10,
        "stock": 5,
        "category": "c",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def path(tmp_path):
    return tmp_path / "products.json"


@pytest.fixture
def store(path):
    return JsonProductStore(JsonFile(path))


class TestCreate:

    def test_ids_start_at_one_and_increase(self, store):
        ids = [store.create(_fields(code=f"C{i}")).id for i in range(4)]
        assert ids == [1, 2, 3, 4]

    def test_ids_continue_after_reload(self, store, path):
        store.create(_fields(code="A"))
        store.create(_fields(code="B"))

        reloaded = JsonProductStore(JsonFile(path))
        assert reloaded.create(_fields(code="C")).id == 3

    def test_deleted_ids_are_not_reused(self, store):
        store.create(_fields(code="A"))
        second = store.create(_fields(code="B"))
        store.delete(second.id)
        assert store.create(_fields(code="C")).id == 3

    def test_persists_immediately(self, store, path):
        store.create(_fields())
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw == [
            {
                "id": 1,
                "title": "Widget",
                "description": "d",
                "code": "A1",
                "price": 10,
                "status": True,
                "stock": 5,
                "category": "c",
                "thumbnails": [],
            }
        ]

    def test_missing_fields_rejected(self, store, path):
        with pytest.raises(ValidationError, match="Missing fields: category"):
            store.create(_fields(category=None))
        assert store.list_all() == []
        assert not path.exists()

    def test_duplicate_code_rejected(self, store):
        store.create(_fields(code="A1"))
        with pytest.raises(DuplicateKeyError):
            store.create(_fields(code="A1", title="Other"))

    def test_failed_create_does_not_consume_an_id(self, store):
        store.create(_fields(code="A1"))
        with pytest.raises(DuplicateKeyError):
            store.create(_fields(code="A1"))
        assert store.create(_fields(code="B1")).id == 2

    def test_code_is_free_again_after_delete(self, store):
        first = store.create(_fields(code="A1"))
        store.delete(first.id)
        assert store.create(_fields(code="A1")).id == 2


class TestRead:

    def test_get_unknown_id(self, store):
        with pytest.raises(NotFoundError, match="Product with ID 42 not found"):
            store.get(42)

    def test_list_in_insertion_order(self, store):
        for code in ("Z", "A", "M"):
            store.create(_fields(code=code))
        assert [p.code for p in store.list_all()] == ["Z", "A", "M"]

    def test_returned_records_are_copies(self, store):
        created = store.create(_fields())
        created.title = "Tampered"
        store.get(created.id).thumbnails.append("x.png")
        assert store.get(created.id).title == "Widget"
        assert store.get(created.id).thumbnails == []


class TestUpdate:

    def test_preserves_fields_not_in_patch(self, store):
        created = store.create(_fields(thumbnails=["a.png"]))
        updated = store.update(created.id, {"price": 25, "title": "Widget 2"})

        assert updated.price == 25
        assert updated.title == "Widget 2"
        assert updated.description == created.description
        assert updated.code == created.code
        assert updated.stock == created.stock
        assert updated.category == created.category
        assert updated.thumbnails == ["a.png"]
        assert store.get(created.id) == updated

    def test_persists(self, store, path):
        created = store.create(_fields())
        store.update(created.id, {"stock": 0})
        assert JsonProductStore(JsonFile(path)).get(created.id).stock == 0

    def test_unknown_id(self, store):
        with pytest.raises(NotFoundError):
            store.update(9, {"price": 1})

    def test_code_clash_with_other_product_rejected(self, store):
        store.create(_fields(code="A1"))
        second = store.create(_fields(code="B1"))
        with pytest.raises(DuplicateKeyError):
            store.update(second.id, {"code": "A1"})
        assert store.get(second.id).code == "B1"

    def test_keeping_own_code_is_fine(self, store):
        created = store.create(_fields(code="A1"))
        assert store.update(created.id, {"code": "A1", "stock": 9}).stock == 9

    def test_unknown_field_rejected(self, store):
        created = store.create(_fields())
        with pytest.raises(ValidationError, match="Unknown product fields: colour"):
            store.update(created.id, {"colour": "red"})
        assert store.get(created.id) == created

    def test_numeric_code_cannot_sidestep_uniqueness(self, store):
        store.create(_fields(code="123"))
        second = store.create(_fields(code="B2"))
        with pytest.raises(ValidationError):
            store.update(second.id, {"code": 123})
        with pytest.raises(DuplicateKeyError):
            store.update(second.id, {"code": "123"})
        assert [p.code for p in store.list_all()] == ["123", "B2"]


class TestDelete:

    def test_then_get_fails(self, store):
        created = store.create(_fields())
        store.delete(created.id)
        with pytest.raises(NotFoundError):
            store.get(created.id)

    def test_absent_id_fails(self, store):
        with pytest.raises(NotFoundError):
            store.delete(1)

    def test_second_delete_fails(self, store):
        created = store.create(_fields())
        store.delete(created.id)
        with pytest.raises(NotFoundError):
            store.delete(created.id)


class TestLoad:

    def test_round_trip_preserves_content_and_order(self, store, path):
        store.create(_fields(code="B", thumbnails=["1.png", "2.png"]))
        store.create(_fields(code="A", status=False, price=9.99))
        store.create(_fields(code="C"))
        store.delete(1)

        reloaded = JsonProductStore(JsonFile(path))
        assert reloaded.list_all() == store.list_all()

    def test_next_id_seeded_from_max_id(self, path):
        path.write_text(
            json.dumps([
                {"id": 7, "title": "t", "description": "d", "code": "X",
                 "price": 1, "stock": 1, "category": "c"},
                {"id": 3, "title": "t", "description": "d", "code": "Y",
                 "price": 1, "stock": 1, "category": "c"},
            ]),
            encoding="utf-8",
        )
        store = JsonProductStore(JsonFile(path))
        assert store.next_id == 8
        assert store.get(7).status is True
        assert store.get(7).thumbnails == []

    def test_malformed_file_starts_empty(self, path):
        path.write_text("garbage", encoding="utf-8")
        store = JsonProductStore(JsonFile(path))
        assert store.list_all() == []
        assert store.create(_fields()).id == 1

    def test_records_missing_keys_start_empty(self, path):
        path.write_text('[{"id": 1}]', encoding="utf-8")
        assert JsonProductStore(JsonFile(path)).list_all() == []

    def test_duplicate_ids_keep_first_and_warn(self, path, caplog):
        record = {"title": "t", "description": "d", "price": 1, "stock": 1, "category": "c"}
        path.write_text(
            json.dumps([
                {"id": 1, "code": "X", **record},
                {"id": 1, "code": "Y", **record},
                {"id": 2, "code": "Z", **record},
            ]),
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING, logger="shop"):
            store = JsonProductStore(JsonFile(path))

        assert [p.code for p in store.list_all()] == ["X", "Z"]
        assert "Duplicate product IDs [1]" in caplog.text


def test_collection_requires_serialization_hooks(path):
    with pytest.raises(TypeError):
        JsonCollection(JsonFile(path))


class FailingJsonFile(JsonFile):

    def __init__(self, file_path) -> None:
        super().__init__(file_path)
        self.fail = False

    def save(self, records) -> None:
        if self.fail:
            raise OSError("disk full")
        super().save(records)


class TestPersistFailure:

    def test_create_is_rolled_back(self, path):
        backing = FailingJsonFile(path)
        store = JsonProductStore(backing)
        store.create(_fields(code="A"))

        backing.fail = True
        with pytest.raises(PersistenceError) as exc_info:
            store.create(_fields(code="B"))
        assert isinstance(exc_info.value.__cause__, OSError)
        assert [p.code for p in store.list_all()] == ["A"]

        backing.fail = False
        assert store.create(_fields(code="B")).id == 2

    def test_update_and_delete_are_rolled_back(self, path):
        backing = FailingJsonFile(path)
        store = JsonProductStore(backing)
        created = store.create(_fields())

        backing.fail = True
        with pytest.raises(PersistenceError):
            store.update(created.id, {"title": "New"})
        with pytest.raises(PersistenceError):
            store.delete(created.id)

        assert store.get(created.id).title == "Widget"
