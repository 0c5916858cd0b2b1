import pytest

import db_connection
from db_connection import Database, db


class FakeAdmin:
    def __init__(self, error=None):
        self.error = error

    def command(self, name):
        if self.error:
            raise self.error
        return {"ok": 1}


class FakeClient:
    instances = []

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.admin = FakeAdmin(kwargs.pop("_ping_error", None))
        self.closed = False
        FakeClient.instances.append(self)

    def __getitem__(self, name):
        return {"name": name}

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def fresh_connection(monkeypatch):
    FakeClient.instances = []
    monkeypatch.setattr(db_connection, "MongoClient", FakeClient)
    Database.reset()
    yield
    Database.reset()


def test_singleton():
    assert Database() is db


def test_no_uri_means_no_database(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    monkeypatch.delenv("DB_NAME", raising=False)
    assert db.connect() is None
    assert db.get_collection("messages") is None
    assert db.health() == {
        "dbReady": False,
        "dbName": "hustleke",
        "hasMongoUri": False,
        "error": "MONGODB_URI not set",
    }
    assert FakeClient.instances == []


def test_connects_once(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017/")
    monkeypatch.setenv("DB_NAME", "faq_test")
    assert db.connect() == {"name": "faq_test"}
    assert db.connect() == {"name": "faq_test"}
    assert len(FakeClient.instances) == 1
    assert "tls" not in FakeClient.instances[0].kwargs
    assert FakeClient.instances[0].kwargs["serverSelectionTimeoutMS"] == 3000
    assert db.health()["dbReady"] is True


def test_atlas_uri_uses_tls(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb+srv://user:pw@cluster0.example.mongodb.net/")
    db.connect()
    kwargs = FakeClient.instances[0].kwargs
    assert kwargs["tls"] is True
    assert kwargs["tlsCAFile"] == db_connection.certifi.where()


def test_failed_ping_is_recorded(monkeypatch):
    class UnreachableClient(FakeClient):
        def __init__(self, uri, **kwargs):
            super().__init__(uri, _ping_error=RuntimeError("unreachable"), **kwargs)

    monkeypatch.setattr(db_connection, "MongoClient", UnreachableClient)
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017/")
    assert db.get_collection("messages") is None
    health = db.health()
    assert health["dbReady"] is False
    assert health["hasMongoUri"] is True
    assert "unreachable" in health["error"]


def test_reset_closes_client(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017/")
    db.connect()
    client = FakeClient.instances[0]
    Database.reset()
    assert client.closed
    assert db.health()["dbReady"] is True
    assert len(FakeClient.instances) == 2
