"""
Shared pytest fixtures for the avatar service.

The Supabase client is replaced by a small in-memory fake that records every
backend call, so tests can check both responses and side effects.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.core.dependencies import get_request_supabase
from app.main import app

SUPABASE_URL = "http://localhost:54321"


# ==================== FAKE SUPABASE ====================

class FakeAuth:
    def __init__(self, backend: "FakeSupabase"):
        self.backend = backend

    def get_user(self, jwt: Optional[str] = None):
        self.backend.calls.append(("auth.get_user", jwt))
        user_id = self.backend.tokens.get(jwt)
        if user_id is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=SimpleNamespace(id=user_id, email=f"{user_id}@example.com"))


class FakeBucket:
    def __init__(self, backend: "FakeSupabase", name: str):
        self.backend = backend
        self.name = name

    def upload(self, path: str, file: bytes, file_options: Optional[Dict[str, str]] = None):
        file_options = file_options or {}
        self.backend.calls.append(("storage.upload", self.name, path, file_options))
        if self.backend.storage_error:
            raise self.backend.storage_error
        objects = self.backend.objects.setdefault(self.name, {})
        if path in objects and file_options.get("upsert") != "true":
            raise Exception("The resource already exists")
        objects[path] = {"content": file, "content-type": file_options.get("content-type")}
        return SimpleNamespace(path=path, full_path=f"{self.name}/{path}")

    def get_public_url(self, path: str) -> str:
        return f"{SUPABASE_URL}/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self, backend: "FakeSupabase"):
        self.backend = backend

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self.backend, bucket)


class FakeQuery:
    def __init__(self, backend: "FakeSupabase", table: str):
        self.backend = backend
        self.table = table
        self.filters: List[tuple] = []
        self.operation = "select"
        self.columns = "*"
        self.values: Dict[str, Any] = {}
        self.single_row = False

    def select(self, columns: str = "*"):
        self.operation = "select"
        self.columns = columns
        return self

    def update(self, values: Dict[str, Any]):
        self.operation = "update"
        self.values = values
        return self

    def eq(self, column: str, value: Any):
        self.filters.append((column, value))
        return self

    def maybe_single(self):
        self.single_row = True
        return self

    def _matches(self) -> List[Dict[str, Any]]:
        rows = self.backend.rows.setdefault(self.table, [])
        return [r for r in rows if all(r.get(c) == v for c, v in self.filters)]

    def execute(self):
        self.backend.calls.append((f"table.{self.operation}", self.table, tuple(self.filters), dict(self.values)))
        if self.backend.table_error:
            raise self.backend.table_error
        matched = self._matches()
        if self.operation == "update":
            for row in matched:
                row.update(self.values)
            return SimpleNamespace(data=[dict(r) for r in matched])
        columns = [c.strip() for c in self.columns.split(",")]
        data = [r if columns == ["*"] else {c: r.get(c) for c in columns} for r in matched]
        if self.single_row:
            if len(data) > 1:
                raise Exception("JSON object requested, multiple (or no) rows returned")
            if not data:
                return None
            return SimpleNamespace(data=data[0])
        return SimpleNamespace(data=data)


class FakeSupabase:
    def __init__(self):
        self.tokens: Dict[str, str] = {}
        self.objects: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.rows: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.storage_error: Optional[Exception] = None
        self.table_error: Optional[Exception] = None
        self.auth = FakeAuth(self)
        self.storage = FakeStorage(self)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def calls_named(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]


# ==================== FIXTURES ====================

@pytest.fixture
def test_settings() -> Settings:
    return Settings(supabase_url=SUPABASE_URL, supabase_anon_key="anon-key")


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    fake = FakeSupabase()
    fake.tokens["token-u1"] = "u1"
    fake.tokens["token-u2"] = "u2"
    fake.rows["user_profiles"] = [
        {"user_id": "u1", "avatar_url": None},
        {"user_id": "u2", "avatar_url": "https://x/u2.png"},
    ]
    return fake


@pytest.fixture
def client(fake_supabase, test_settings):
    app.dependency_overrides[get_request_supabase] = lambda: fake_supabase
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": "Bearer token-u1"}
