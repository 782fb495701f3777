"""
Shared fixtures.

FakeSupabaseClient stands in for the Supabase client: it keeps tables as
lists of dicts and answers the PostgREST builder calls the stores make
(select/insert/update/delete, eq, limit, execute).
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient
from passlib.context import CryptContext
from postgrest.exceptions import APIError

from app.api.auth import PasswordHasher
from app.api.config import Settings
from app.api.main import create_app

TEST_SECRET = "test-secret-" + "0123456789abcdef" * 4

UNIQUE_COLUMNS = {"users": ("email",)}
TIMESTAMP_DEFAULTS = {"projects": ("date_created", "last_edited"), "notes": ("date_created", "last_edited")}


# ============================================================================
# FAKE SUPABASE
# ============================================================================


@dataclass
class FakeResponse:
    data: list[dict[str, Any]]


class FakeQuery:
    def __init__(self, client: "FakeSupabaseClient", table: str):
        self._client = client
        self._table = table
        self._action = "select"
        self._columns: list[str] | None = None
        self._payload: dict[str, Any] | None = None
        self._filters: list[tuple[str, Any]] = []
        self._limit: int | None = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self._action = "select"
        if columns.strip() != "*":
            self._columns = [c.strip() for c in columns.split(",")]
        return self

    def insert(self, row: dict[str, Any]) -> "FakeQuery":
        self._action = "insert"
        self._payload = row
        return self

    def update(self, data: dict[str, Any]) -> "FakeQuery":
        self._action = "update"
        self._payload = data
        return self

    def delete(self) -> "FakeQuery":
        self._action = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeQuery":
        self._limit = count
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def execute(self) -> FakeResponse:
        self._client.calls.append((self._action, self._table, copy.deepcopy(self._payload), list(self._filters)))
        if self._client.fail_with is not None:
            raise APIError(self._client.fail_with)

        rows = self._client.tables.setdefault(self._table, [])

        if self._action == "insert":
            row = copy.deepcopy(self._payload)
            for column in UNIQUE_COLUMNS.get(self._table, ()):
                if any(existing.get(column) == row.get(column) for existing in rows):
                    raise APIError({
                        "code": "23505",
                        "message": f'duplicate key value violates unique constraint "{self._table}_{column}_key"',
                    })
            now = datetime.now(timezone.utc).isoformat()
            for column in TIMESTAMP_DEFAULTS.get(self._table, ()):
                row.setdefault(column, now)
            rows.append(row)
            return FakeResponse(data=[copy.deepcopy(row)])

        matched = [row for row in rows if self._matches(row)]

        if self._action == "update":
            for row in matched:
                row.update(copy.deepcopy(self._payload))
            return FakeResponse(data=copy.deepcopy(matched))

        if self._action == "delete":
            self._client.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(data=copy.deepcopy(matched))

        if self._limit is not None:
            matched = matched[: self._limit]
        if self._columns is not None:
            matched = [{c: row[c] for c in self._columns if c in row} for row in matched]
        return FakeResponse(data=copy.deepcopy(matched))


@dataclass
class FakeSupabaseClient:
    tables: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    calls: list[tuple] = field(default_factory=list)
    fail_with: dict[str, str] | None = None

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def writes(self, table: str | None = None) -> list[tuple]:
        return [
            call for call in self.calls
            if call[0] != "select" and (table is None or call[1] == table)
        ]


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="http://localhost:54321",
        supabase_service_role_key="test-role-key",
        jwt_secret=TEST_SECRET,
        jwt_expiration_in_seconds=3600,
        service_env="test",
    )


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    """bcrypt at the minimum cost so suites that register users stay quick."""
    return PasswordHasher(CryptContext(schemes=["bcrypt"], bcrypt__rounds=4))


@pytest.fixture
def fake_db() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def app(settings: Settings, fake_db: FakeSupabaseClient, fast_hasher: PasswordHasher):
    app = create_app(settings, db_client=fake_db)
    app.state.password_hasher = fast_hasher
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def register(client: TestClient, email: str, password: str = "password123", **overrides: str):
    body = {"firstName": "Alice", "lastName": "Liddell", "email": email, "password": password}
    body.update(overrides)
    return client.post("/api/v1/register", json=body)


def login(client: TestClient, email: str, password: str = "password123"):
    return client.post("/api/v1/login", json={"email": email, "password": password})


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Registered and logged-in alice@example.com."""
    assert register(client, "alice@example.com").status_code == 201
    token = login(client, "alice@example.com").json()["token"]
    return {"Authorization": token}


@pytest.fixture
def other_headers(client: TestClient) -> dict[str, str]:
    """A second user, bob@example.com."""
    assert register(client, "bob@example.com", firstName="Bob").status_code == 201
    token = login(client, "bob@example.com").json()["token"]
    return {"Authorization": token}


@pytest.fixture
def project_id(client: TestClient, auth_headers: dict[str, str]) -> str:
    response = client.post(
        "/api/v1/projects/create-new-project",
        json={
            "title": "Dev journal",
            "description": "Backend rewrite",
            "priority": "high",
            "deadline": "2026-12-31",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()["projectID"]
