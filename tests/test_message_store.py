from datetime import datetime

from pymongo import DESCENDING
from pymongo.errors import ServerSelectionTimeoutError

from faq_intelligence import message_store


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs
        self.sort_args = None
        self.limit_value = None

    def sort(self, *args):
        self.sort_args = args
        return self

    def limit(self, value):
        self.limit_value = value
        return self

    def __iter__(self):
        return iter(self.docs)


class FakeCollection:
    def __init__(self, docs=None, error=None):
        self.cursor = FakeCursor(docs or [])
        self.error = error
        self.find_args = None

    def find(self, *args):
        if self.error:
            raise self.error
        self.find_args = args
        return self.cursor


class FakeDatabase:
    def __init__(self, collection):
        self.collection = collection
        self.requested = None

    def get_collection(self, name):
        self.requested = name
        return self.collection


def test_returns_none_without_database(monkeypatch):
    monkeypatch.setattr(message_store, "db", FakeDatabase(None))
    assert message_store.get_recent_questions() is None


def test_returns_none_on_read_failure(monkeypatch):
    collection = FakeCollection(error=ServerSelectionTimeoutError("no servers"))
    monkeypatch.setattr(message_store, "db", FakeDatabase(collection))
    assert message_store.get_recent_questions() is None


def test_reads_newest_question_messages(monkeypatch):
    docs = [
        {"content": "How do I top up?", "created_at": datetime(2026, 10, 2)},
        {"content": "What is the fee?", "created_at": datetime(2026, 10, 1)},
    ]
    collection = FakeCollection(docs)
    fake_db = FakeDatabase(collection)
    monkeypatch.setattr(message_store, "db", fake_db)

    assert message_store.get_recent_questions(limit=50) == docs
    assert fake_db.requested == message_store.MESSAGES_COLLECTION
    query, projection = collection.find_args
    assert query == {"content": {"$regex": r"\?"}}
    assert projection == {"_id": 0, "content": 1, "created_at": 1}
    assert collection.cursor.sort_args == ("created_at", DESCENDING)
    assert collection.cursor.limit_value == 50


def test_default_scan_limit(monkeypatch):
    collection = FakeCollection([])
    monkeypatch.setattr(message_store, "db", FakeDatabase(collection))
    assert message_store.get_recent_questions() == []
    assert collection.cursor.limit_value == message_store.TRENDING_SCAN_LIMIT
