from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object, no database access. ``password_hash`` is None when the
    record was loaded without its password.
    """

    user_id: str
    first_name: str
    last_name: str
    email: str
    username: str
    is_admin: bool
    created_at: Optional[datetime]
    password_hash: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def summary(self) -> dict:
        """Identity summary returned on login."""
        return {
            "username": self.username,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "isAdmin": self.is_admin,
        }

    def to_public_dict(self) -> dict:
        return {
            "_id": self.user_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "username": self.username,
            "isAdmin": self.is_admin,
            "createdAt": isoformat_or_none(self.created_at),
        }
