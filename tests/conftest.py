from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional
from unittest.mock import MagicMock

import pytest
from werkzeug.security import generate_password_hash

from src.time_tracker.time_tracker.attendance.model import TimeEntry
from src.time_tracker.time_tracker.auth.tokens import TokenService
from src.time_tracker.time_tracker.container import assemble_container
from src.time_tracker.time_tracker.core.enums import EntryStatus
from src.time_tracker.time_tracker.core.exceptions import ConcurrentClockError, ConflictError
from src.time_tracker.time_tracker.main import create_app
from src.time_tracker.time_tracker.users.model import User

TEST_SECRET = "test-secret-key-for-time-tracker-0123456789"
# Cheap hash so the suite stays fast; production uses werkzeug's default.
FAST_HASH = "pbkdf2:sha256:1000"


class InMemoryUsers:
    def __init__(self):
        self._by_username: dict[str, User] = {}
        self._id = 0

    def get_by_username(self, username: str) -> Optional[User]:
        return self._by_username.get(username)

    def get_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        for u in self._by_username.values():
            if u.username == username or u.email == email:
                return u
        return None

    def create_user(self, *, first_name, last_name, email, username, password_hash, is_admin=False, created_at=None) -> User:
        if self.get_by_username_or_email(username, email):
            raise ConflictError("Username or email already exists")
        self._id += 1
        user = User(
            user_id=str(self._id),
            first_name=first_name,
            last_name=last_name,
            email=email,
            username=username,
            is_admin=is_admin,
            created_at=created_at or datetime(2026, 1, 1, 9, 0, self._id % 60),
            password_hash=password_hash,
        )
        self._by_username[username] = user
        return user

    def list_all(self):
        users = sorted(self._by_username.values(), key=lambda u: u.created_at, reverse=True)
        return [replace(u, password_hash=None) for u in users]

    def count(self) -> int:
        return len(self._by_username)


class InMemoryEntries:
    def __init__(self):
        self._by_id: dict[str, TimeEntry] = {}
        self._id = 0

    def create(self, entry: TimeEntry) -> TimeEntry:
        if entry.status == EntryStatus.CLOCKED_IN and self._active_for(entry.username):
            raise ConcurrentClockError("Already clocked in")
        self._id += 1
        stored = replace(entry, entry_id=str(self._id))
        self._by_id[stored.entry_id] = stored
        return stored

    def find_active(self, username: str) -> Optional[TimeEntry]:
        return self._active_for(username)

    def _active_for(self, username: str) -> Optional[TimeEntry]:
        for e in self._by_id.values():
            if e.username == username and e.status == EntryStatus.CLOCKED_IN:
                return e
        return None

    def update(self, entry: TimeEntry) -> bool:
        current = self._by_id.get(entry.entry_id)
        if current is None or current.status != EntryStatus.CLOCKED_IN:
            return False
        self._by_id[entry.entry_id] = replace(
            current,
            clock_out=entry.clock_out,
            status=entry.status,
            hours_worked=entry.hours_worked,
        )
        return True

    def list_entries(self, username: Optional[str] = None):
        items = [e for e in self._by_id.values() if username is None or e.username == username]
        items.sort(key=lambda e: e.clock_in, reverse=True)
        return items

    def count(self, status: Optional[EntryStatus] = None) -> int:
        return sum(1 for e in self._by_id.values() if status is None or e.status == status)


class FakeConnection:
    """Stands in for DatabaseConnection: one MagicMock per collection name."""

    def __init__(self):
        self.collections: dict[str, MagicMock] = {}

    def collection(self, name: str) -> MagicMock:
        if name not in self.collections:
            mock = MagicMock(name=name)
            # pymongo returns the index name
            mock.create_index.side_effect = lambda keys, **kwargs: kwargs["name"]
            self.collections[name] = mock
        return self.collections[name]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 5, 8, 30, 0)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def entries_repo() -> InMemoryEntries:
    return InMemoryEntries()


@pytest.fixture
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture
def make_user(users_repo):
    def _make(username="jdoe", *, password="pw1", is_admin=False, first_name="John", last_name="Doe"):
        return users_repo.create_user(
            first_name=first_name,
            last_name=last_name,
            email=f"{username}@example.com",
            username=username,
            password_hash=generate_password_hash(password, method=FAST_HASH),
            is_admin=is_admin,
        )

    return _make


@pytest.fixture
def container(users_repo, entries_repo):
    return assemble_container(
        users_repo=users_repo,
        entries_repo=entries_repo,
        jwt_secret=TEST_SECRET,
        password_method=FAST_HASH,
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    def _headers(username: str, password: str) -> dict:
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.get_json()
        return {"Authorization": f"Bearer {response.get_json()['token']}"}

    return _headers


@pytest.fixture
def jwt_secret() -> str:
    return TEST_SECRET
