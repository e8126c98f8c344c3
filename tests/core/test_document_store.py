"""DocumentCollection: JSON documents in SQLite with store-assigned ids.

Invariants:
    - insert_one ignores any client _id and returns a fresh PostId
    - find_all preserves insertion order and returns independent copies
    - replace_by_id / delete_by_id report whether a document matched
    - Collections with different names never see each other's documents
    - sqlite3 failures surface as PersistenceError
"""

import pytest

from message_board_api.app.core.document_store import DocumentCollection
from message_board_api.app.core.errors import PersistenceError
from message_board_api.app.core.identifiers import PostId


def test_insert_assigns_new_id_and_ignores_client_id(collection):
    client_id = "f" * 32
    doc_id = collection.insert_one({"_id": client_id, "title": "Write"})

    assert isinstance(doc_id, PostId)
    assert str(doc_id) != client_id
    assert collection.find_by_id(doc_id) == {"_id": str(doc_id), "title": "Write"}
    assert collection.find_by_id(PostId(client_id)) is None


def test_insert_stores_a_copy(collection):
    document = {"title": "Write", "votes": 0}
    doc_id = collection.insert_one(document)
    document["votes"] = 5

    assert collection.find_by_id(doc_id)["votes"] == 0


def test_find_all_preserves_insertion_order(collection, seeded_ids):
    docs = collection.find_all()
    assert [d["_id"] for d in docs] == seeded_ids
    assert [d["title"] for d in docs] == ["Create", "Read", "Update", "Delete"]


def test_find_all_returns_copies(collection, seeded_ids):
    collection.find_all()[0]["votes"] = 1
    assert collection.find_all()[0]["votes"] == 0


def test_replace_overwrites_every_field_but_id(collection, seeded_ids):
    target = PostId(seeded_ids[2])
    matched = collection.replace_by_id(target, {"_id": "x", "title": "Only title"})

    assert matched is True
    assert collection.find_by_id(target) == {"_id": seeded_ids[2], "title": "Only title"}


def test_replace_missing_document_changes_nothing(collection, seeded_ids):
    before = collection.find_all()
    assert collection.replace_by_id(PostId.generate(), {"title": "Ghost"}) is False
    assert collection.find_all() == before


def test_delete_by_id(collection, seeded_ids):
    target = PostId(seeded_ids[0])
    assert collection.delete_by_id(target) is True
    assert collection.find_by_id(target) is None
    assert collection.delete_by_id(target) is False
    assert collection.count() == 3


def test_delete_all_returns_removed_count(collection, seeded_ids):
    assert collection.delete_all() == 4
    assert collection.count() == 0


def test_collections_are_isolated(database_path, collection, seeded_ids):
    other = DocumentCollection("drafts", database_path)
    other.insert_one({"title": "Draft"})

    assert other.count() == 1
    assert collection.count() == 4


def test_missing_schema_raises_persistence_error(tmp_path):
    unmigrated = DocumentCollection("posts", str(tmp_path / "empty.db"))
    with pytest.raises(PersistenceError):
        unmigrated.find_all()


def test_unreachable_database_raises_persistence_error(tmp_path):
    unreachable = DocumentCollection("posts", str(tmp_path / "missing" / "db.sqlite"))
    with pytest.raises(PersistenceError):
        unreachable.insert_one({"title": "Write"})
