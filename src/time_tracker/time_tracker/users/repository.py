from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        raise NotImplementedError

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
        """Persist a new user; raises ConflictError on duplicate username/email."""

        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        """All users without their password hash, newest first."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
