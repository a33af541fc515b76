"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import copy
import datetime
import re
import threading
import time
import uuid
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError
from supabase import AuthError

from hoopcamp.database import client as client_module
from hoopcamp.database.tables import TABLES_BY_NAME

# Embedded table name -> foreign key column on the parent row
EMBED_KEYS = {
    "camps": "camp_id",
    "games": "game_id",
    "training_sessions": "training_session_id",
    "profiles": "student_id",
}

EMBED_PATTERN = re.compile(r"^(\w+)\(\*\)$")


def _api_error(message: str, code: str = "P0001") -> APIError:
    return APIError({"message": message, "code": code, "hint": None, "details": None})


class FakeQuery:
    """Chainable query builder mimicking the postgrest request builder."""

    def __init__(self, db: "FakeSupabaseClient", table_name: str):
        self.db = db
        self.table_name = table_name
        self.operation = "select"
        self.columns = "*"
        self.count = None
        self.payload = None
        self.filters = []
        self.order_by = None
        self.limit_to = None

    def select(self, columns: str = "*", count: str | None = None):
        self.operation = "select"
        self.columns = columns
        self.count = count
        return self

    def insert(self, values: dict):
        self.operation = "insert"
        self.payload = values
        return self

    def update(self, values: dict):
        self.operation = "update"
        self.payload = values
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column: str, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column: str, values):
        allowed = list(values)
        self.filters.append(lambda row: row.get(column) in allowed)
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = (column, desc)
        return self

    def limit(self, size: int):
        self.limit_to = size
        return self

    def execute(self):
        if self.operation == "select":
            return self.db._select(self)
        if self.table_name in self.db.failing_tables:
            raise _api_error(f"write to {self.table_name} rejected")
        if self.operation == "insert":
            return self.db._insert(self.table_name, self.payload)
        if self.operation == "update":
            return self.db._update(self)
        return self.db._delete(self)


class FakeAuth:
    """Email/password auth with a single signed-in user per client."""

    def __init__(self, db: "FakeSupabaseClient"):
        self.db = db
        self.users = {}
        self.current_user = None
        self.require_confirmation = False

    def sign_up(self, credentials: dict):
        email = credentials["email"]
        if email in self.users:
            raise AuthError("User already registered", "user_already_exists")
        metadata = credentials.get("options", {}).get("data", {})
        user = SimpleNamespace(id=str(uuid.uuid4()), email=email)
        self.users[email] = (user, credentials["password"])
        # Profile row created from the metadata, like the database trigger does
        self.db.seed("profiles", {
            "id": user.id,
            "email": email,
            "name": metadata.get("name", ""),
            "role": metadata.get("role", "student"),
        })
        if self.require_confirmation:
            return SimpleNamespace(user=user, session=None)
        self.current_user = user
        return SimpleNamespace(user=user, session=SimpleNamespace(access_token="token"))

    def sign_in_with_password(self, credentials: dict):
        user, password = self.users.get(credentials["email"], (None, None))
        if user is None or password != credentials["password"]:
            raise AuthError("Invalid login credentials", "invalid_credentials")
        self.current_user = user
        return SimpleNamespace(user=user, session=SimpleNamespace(access_token="token"))

    def get_user(self):
        if self.current_user is None:
            return None
        return SimpleNamespace(user=self.current_user)

    def sign_out(self):
        self.current_user = None


class FakeSupabaseClient:
    """In-memory tables behind the subset of the client API the app uses.

    ``failing_tables`` makes every write to the named tables raise an
    APIError; ``select_delay`` sleeps inside each select to widen races.
    """

    def __init__(self):
        self.tables = {name: [] for name in TABLES_BY_NAME}
        self.auth = FakeAuth(self)
        self.failing_tables = set()
        self.select_delay = 0.0
        self._lock = threading.Lock()
        self._clock = datetime.datetime(2025, 1, 1, tzinfo=datetime.UTC)

    def table(self, table_name: str) -> FakeQuery:
        return FakeQuery(self, table_name)

    def seed(self, table_name: str, values: dict) -> dict:
        """Insert a row directly, bypassing failure injection."""
        return self._insert(table_name, values).data[0]

    def rows(self, table_name: str) -> list[dict]:
        return [copy.deepcopy(row) for row in self.tables[table_name]]

    def _next_timestamp(self) -> str:
        self._clock += datetime.timedelta(seconds=1)
        return self._clock.isoformat()

    def _matching(self, query: FakeQuery) -> list[dict]:
        return [
            row for row in self.tables[query.table_name]
            if all(check(row) for check in query.filters)
        ]

    def _project(self, row: dict, columns: str) -> dict:
        result = {}
        for part in (p.strip() for p in columns.split(",")):
            embed = EMBED_PATTERN.match(part)
            if part == "*":
                result.update(copy.deepcopy(row))
            elif embed:
                embedded = embed.group(1)
                key = row.get(EMBED_KEYS[embedded])
                target = next((r for r in self.tables[embedded] if r["id"] == key), None)
                result[embedded] = copy.deepcopy(target)
            else:
                result[part] = row.get(part)
        return result

    def _select(self, query: FakeQuery):
        if self.select_delay:
            time.sleep(self.select_delay)
        with self._lock:
            rows = self._matching(query)
            if query.order_by:
                column, desc = query.order_by
                rows = sorted(rows, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
            if query.limit_to:
                rows = rows[:query.limit_to]
            data = [self._project(row, query.columns) for row in rows]
        count = len(data) if query.count else None
        return SimpleNamespace(data=data, count=count)

    def _insert(self, table_name: str, values: dict):
        with self._lock:
            row = dict(values)
            row.setdefault("id", str(uuid.uuid4()))
            row.setdefault("created_at", self._next_timestamp())
            unique = TABLES_BY_NAME[table_name].unique_together
            if unique and any(
                all(existing.get(col) == row.get(col) for col in unique)
                for existing in self.tables[table_name]
            ):
                raise _api_error(f"duplicate key value violates unique constraint on {table_name}", "23505")
            self.tables[table_name].append(row)
            return SimpleNamespace(data=[copy.deepcopy(row)], count=None)

    def _update(self, query: FakeQuery):
        with self._lock:
            updated = []
            for row in self._matching(query):
                row.update(query.payload)
                updated.append(copy.deepcopy(row))
            return SimpleNamespace(data=updated, count=None)

    def _delete(self, query: FakeQuery):
        with self._lock:
            doomed = self._matching(query)
            self.tables[query.table_name] = [
                row for row in self.tables[query.table_name] if row not in doomed
            ]
            return SimpleNamespace(data=[copy.deepcopy(row) for row in doomed], count=None)


@pytest.fixture
def fake_db(monkeypatch):
    """Route every database call through a fresh in-memory client."""
    fake = FakeSupabaseClient()
    monkeypatch.setenv("SUPABASE_URL", "http://localhost:54321")
    monkeypatch.setenv("SUPABASE_KEY", "test-anon-key")
    monkeypatch.setattr(client_module, "_client", fake)
    return fake


@pytest.fixture
def camp(fake_db):
    return fake_db.seed("camps", {
        "name": "Summer Hoops",
        "start_date": "2025-06-01",
        "end_date": "2025-06-14",
        "price": 250.0,
        "location": "Main Gym",
        "description": None,
    })


@pytest.fixture
def students(fake_db, camp):
    """Two students enrolled in ``camp``."""
    rows = []
    for name in ("Ana Lopez", "Ben Carter"):
        profile = fake_db.seed("profiles", {
            "name": name,
            "role": "student",
            "email": f"{name.split()[0].lower()}@example.com",
        })
        fake_db.seed("enrollments", {"student_id": profile["id"], "camp_id": camp["id"]})
        rows.append(profile)
    return rows


@pytest.fixture
def game(fake_db, camp):
    return fake_db.seed("games", {
        "camp_id": camp["id"],
        "game_date": "2025-06-05",
        "opponent_name": "Eagles",
        "team_1_name": "Hawks",
        "team_2_name": "Eagles",
    })


@pytest.fixture
def training_session(fake_db, camp):
    return fake_db.seed("training_sessions", {
        "camp_id": camp["id"],
        "session_date": "2025-06-03",
        "drill_topic": "Pick and roll",
        "notes": None,
    })
