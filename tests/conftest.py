"""Shared fixtures: temporary database, seeded posts, service and HTTP client.

Invariants:
    - Every test gets its own SQLite file under tmp_path, already migrated
    - Seeded tests start with exactly four posts: Create, Read, Update, Delete
    - The app under test is built by create_app() with settings pointing at
      the temporary database; TestClient is entered so the lifespan runs
"""

import os

os.environ.setdefault("MESSAGE_BOARD_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from message_board_api.app.core.config import Settings
from message_board_api.app.core.db import init_db
from message_board_api.app.core.document_store import DocumentCollection
from message_board_api.app.main import create_app
from message_board_api.app.services.post_service import PostService
from seed_posts import sample_posts


@pytest.fixture
def database_path(tmp_path):
    path = str(tmp_path / "message_board_test.db")
    init_db(path)
    return path


@pytest.fixture
def collection(database_path):
    return DocumentCollection("posts", database_path)


@pytest.fixture
def seeded_ids(collection):
    """Insert the four sample posts; returns their ids in insertion order."""
    return [str(collection.insert_one(post)) for post in sample_posts()]


@pytest.fixture
def service(collection, seeded_ids):
    return PostService(collection)


@pytest.fixture
def new_post():
    return {
        "title": "Write",
        "author": "Sherlock",
        "date": sample_posts()[0]["date"],
        "summary": "",
        "votes": 0,
    }


@pytest.fixture
def app(database_path):
    return create_app(Settings(environment="test", database_url=database_path))


@pytest.fixture
def client(app, seeded_ids):
    with TestClient(app) as c:
        yield c
