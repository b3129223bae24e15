"""Pytest configuration and shared fixtures."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

EMPLOYEE_ID = "3f1c2a9e-8b7d-4e6f-9a1b-2c3d4e5f6a7b"


def _matches(doc, query):
    for key, expected in (query or {}).items():
        if isinstance(expected, dict) and "$in" in expected:
            if doc.get(key) not in expected["$in"]:
                return False
        elif doc.get(key) != expected:
            return False
    return True


def _project(doc, projection):
    if not projection:
        return dict(doc)
    included = [key for key, flag in projection.items() if flag and key != "_id"]
    if included:
        result = {key: doc[key] for key in included if key in doc}
        if projection.get("_id", 1) and "_id" in doc:
            result["_id"] = doc["_id"]
        return result
    return {key: value for key, value in doc.items() if projection.get(key, 1)}


class FakeCursor:
    """In-memory stand-in for a motor cursor."""

    def __init__(self, docs, error=None):
        self.docs = docs
        self.error = error

    def sort(self, key, direction=1):
        self.docs = sorted(
            self.docs,
            key=lambda doc: (doc.get(key) is not None, doc.get(key) or ""),
            reverse=direction == -1,
        )
        return self

    def limit(self, count):
        if count:
            self.docs = self.docs[:count]
        return self

    async def to_list(self, length=None):
        if self.error:
            raise self.error
        return list(self.docs if length is None else self.docs[:length])


class FakeCollection:
    """In-memory stand-in for a motor collection."""

    def __init__(self, docs=None, error=None):
        self.docs = list(docs or [])
        self.error = error

    def find(self, query=None, projection=None):
        docs = [_project(doc, projection) for doc in self.docs if _matches(doc, query)]
        return FakeCursor(docs, error=self.error)

    async def find_one(self, query=None, projection=None):
        if self.error:
            raise self.error
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None


class FakeDatabase:
    """In-memory stand-in for a motor database."""

    def __init__(self, collections=None, error=None, name="empnotes_test"):
        self.name = name
        self.error = error
        self.collections = {
            key: value if isinstance(value, FakeCollection) else FakeCollection(value, error)
            for key, value in (collections or {}).items()
        }

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(error=self.error)
        return self.collections[name]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    async def list_collection_names(self):
        if self.error:
            raise self.error
        return [name for name, collection in self.collections.items() if collection.docs]


@pytest.fixture
def employee_id():
    """Valid employee UUID."""
    return EMPLOYEE_ID


@pytest.fixture
def sample_row():
    """A complete backend row."""
    return {
        "id": 1,
        "note_content": "I love this topic! It really helped me understand the concepts better.",
        "employee_id": EMPLOYEE_ID,
        "is_public": True,
        "is_approved_cbh": True,
        "is_approved_emp": True,
        "address": "Topic 1, Item 2",
        "quote": None,
        "note_type": "public",
        "view_count": 15,
        "like_count": 3,
        "article_link": None,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def legacy_row():
    """A row written before note_type, address and counters existed."""
    return {
        "id": 7,
        "note_content": "Remember to revisit the second module.",
        "employee_id": EMPLOYEE_ID,
        "topic_id": 12,
        "is_public": False,
        "is_approved_cbh": False,
        "is_approved_emp": False,
        "created_at": "2024-02-01T00:00:00Z",
    }


@pytest.fixture
def sample_rows(sample_row, legacy_row):
    """Rows as stored in the backend, in no particular order."""
    article = {
        **sample_row,
        "id": 4,
        "note_content": "I found this article very insightful and practical.",
        "address": "Resource Library",
        "note_type": "article",
        "view_count": 28,
        "like_count": 6,
        "article_link": "https://example.com/leadership-tips",
        "created_at": "2024-03-01T00:00:00Z",
    }
    return [sample_row, legacy_row, article]


@pytest.fixture
def fake_db(sample_rows):
    """Fake database holding the sample notes."""
    return FakeDatabase({"notes": [{"_id": f"oid-{row['id']}", **row} for row in sample_rows]})


@pytest.fixture
def api_client(fake_db):
    """FastAPI test client backed by the fake database, without running the lifespan."""
    from api.app import app

    with (
        patch("api.routes.notes.get_db", return_value=fake_db),
        patch("api.routes.debug.get_db", return_value=fake_db),
        patch("api.routes.topics.get_db", return_value=fake_db),
    ):
        yield TestClient(app)


@pytest.fixture
def make_fake_db():
    """Factory for fake databases with custom contents or errors."""
    return FakeDatabase
