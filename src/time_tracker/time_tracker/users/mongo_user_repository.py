from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from ..common.datetime_utils import now_local
from ..core.constants import USERS_COLLECTION
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from .model import User
from .repository import UserRepository


def _to_user(doc: dict[str, Any]) -> User:
    return User(
        user_id=str(doc["_id"]),
        first_name=doc["firstName"],
        last_name=doc["lastName"],
        email=doc["email"],
        username=doc["username"],
        is_admin=bool(doc.get("isAdmin", False)),
        created_at=doc.get("createdAt"),
        password_hash=doc.get("password"),
    )


class MongoUserRepository(UserRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _users(self):
        return self._conn.collection(USERS_COLLECTION)

    def get_by_username(self, username: str) -> Optional[User]:
        doc = self._users.find_one({"username": username})
        return _to_user(doc) if doc else None

    def get_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        doc = self._users.find_one({"$or": [{"username": username}, {"email": email}]})
        return _to_user(doc) if doc else None

    def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        username: str,
        password_hash: str,
        is_admin: bool = False,
        created_at: Optional[datetime] = None,
    ) -> User:
        doc = {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "username": username,
            "password": password_hash,
            "isAdmin": bool(is_admin),
            "createdAt": created_at or now_local(),
        }
        try:
            result = self._users.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ConflictError("Username or email already exists") from exc
        doc["_id"] = result.inserted_id
        return _to_user(doc)

    def list_all(self) -> Sequence[User]:
        cursor = self._users.find({}, {"password": 0}).sort("createdAt", DESCENDING)
        return [_to_user(doc) for doc in cursor]

    def count(self) -> int:
        return int(self._users.count_documents({}))
