"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import itertools
from pathlib import Path
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError
from supabase_auth.errors import AuthError

import backend
import logger

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")

TEST_USER = {"id": "user-1", "email": "ana@example.com"}


class FakeAuthError(AuthError):
    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message


class FakeQuery:
    """Mimics the postgrest builder chain: table().select/insert/delete().eq().order().execute()."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.action = "select"
        self.payload = None
        self.filters = []
        self.ordering = None

    def select(self, *columns):
        return self

    def insert(self, row):
        self.action = "insert"
        self.payload = row
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def execute(self):
        self.db.calls.append((self.table, self.action))
        if self.db.fail_with is not None:
            raise self.db.fail_with

        rows = self.db.tables.setdefault(self.table, [])
        if self.action == "insert":
            stored = dict(self.payload, id=f"doc-{next(self.db.ids)}", created_at=self.db.next_timestamp(), file_url=None)
            rows.append(stored)
            return SimpleNamespace(data=[stored])

        matching = [r for r in rows if all(r.get(c) == v for c, v in self.filters)]
        if self.action == "delete":
            self.db.tables[self.table] = [r for r in rows if r not in matching]
            return SimpleNamespace(data=matching)

        if self.ordering:
            column, desc = self.ordering
            matching = sorted(matching, key=lambda r: r[column], reverse=desc)
        return SimpleNamespace(data=matching)


class FakeAuth:
    def __init__(self):
        self.user = None
        self.accounts = {}

    def sign_in_with_password(self, credentials):
        if self.accounts.get(credentials["email"]) != credentials["password"]:
            raise FakeAuthError("Invalid login credentials")
        self.user = SimpleNamespace(id=f"user-{credentials['email']}", email=credentials["email"])
        return SimpleNamespace(user=self.user, session=object())

    def sign_up(self, credentials):
        self.accounts[credentials["email"]] = credentials["password"]
        return SimpleNamespace(user=SimpleNamespace(id=f"user-{credentials['email']}", email=credentials["email"]), session=None)

    def sign_out(self):
        self.user = None

    def get_user(self):
        if self.user is None:
            return None
        return SimpleNamespace(user=self.user)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self.fail_with = None
        self.ids = itertools.count(1)
        self._days = itertools.count(1)
        self.auth = FakeAuth()

    def table(self, name):
        return FakeQuery(self, name)

    def next_timestamp(self):
        return f"2025-03-{next(self._days):02d}T10:00:00.123456+00:00"

    def sign_in_as(self, user):
        self.auth.user = SimpleNamespace(**user)

    def add_document(self, **row):
        doc = {
            "id": f"doc-{next(self.ids)}",
            "user_id": TEST_USER["id"],
            "document_type": "servicios",
            "title": "Documento",
            "fields_data": {},
            "created_at": self.next_timestamp(),
            "file_url": None,
        }
        doc.update(row)
        self.tables.setdefault(backend.DOCUMENTS_TABLE, []).append(doc)
        return doc


@pytest.fixture
def fake_client():
    client = FakeSupabase()
    client.sign_in_as(TEST_USER)
    return client


@pytest.fixture
def api_error():
    return APIError({"message": "permission denied for table documents", "code": "42501"})


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    path = tmp_path / "activity_log.csv"
    monkeypatch.setattr(logger, "LOG_FILE", str(path))
    return path


@pytest.fixture
def app_test(fake_client, monkeypatch):
    """AppTest for app.py, signed in as TEST_USER and talking to fake_client."""
    from streamlit.testing.v1 import AppTest

    monkeypatch.setattr(backend, "get_client", lambda: fake_client)
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.session_state["user"] = dict(TEST_USER)
    return at


@pytest.fixture
def signed_out_app(fake_client, monkeypatch):
    """AppTest for app.py with nobody signed in."""
    from streamlit.testing.v1 import AppTest

    fake_client.auth.sign_out()
    monkeypatch.setattr(backend, "get_client", lambda: fake_client)
    return AppTest.from_file(APP_PATH, default_timeout=10)
