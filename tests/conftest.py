"""
Shared fixtures: an in-memory SQLite database per test, a TestClient wired to
it, and fakes for the translation provider and the storage bucket.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lingomentor.database import get_db, init_db, make_engine
from lingomentor.main import app
from lingomentor.storage import StorageError, get_storage
from lingomentor.translation import TranslationError, get_translator


class FakeTranslator:
    def __init__(self):
        self.calls = []
        self.fail_for = set()

    def __call__(self, text: str, from_lang: str, to_lang: str) -> str:
        self.calls.append((text, from_lang, to_lang))
        if to_lang in self.fail_for:
            raise TranslationError(f"quota exceeded for {to_lang}")
        return f"[{to_lang}] {text}"


class FakeStorage:
    base = "https://bucket.test/storage/v1/object/public/voice-files"

    def __init__(self):
        self.objects = {}
        self.deleted = []
        self.fail_upload = False

    def upload(self, name, data, content_type=None):
        if self.fail_upload:
            raise StorageError("Storage upload failed: 500 boom")
        self.objects[name] = (data, content_type)
        return f"{self.base}/{name}"

    def delete(self, name):
        self.deleted.append(name)
        self.objects.pop(name, None)


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(engine, translator, storage):
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_translator] = lambda: translator
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def clock(monkeypatch):
    """Strictly increasing timestamps for the chat service."""
    state = {"now": datetime(2024, 6, 1, 12, 0, 0)}

    def tick():
        state["now"] += timedelta(seconds=1)
        return state["now"]

    monkeypatch.setattr("lingomentor.services.chat.utcnow", tick)
    return state


@pytest.fixture
def make_user(client):
    def _make(email="ana@example.com", name="Ana", **profile):
        resp = client.post("/api/users", json={"email": email, "name": name, **profile})
        assert resp.status_code == 200, resp.text
        return resp.json()["user"]["id"]

    return _make
