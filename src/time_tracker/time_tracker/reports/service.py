from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import TimeEntry
from ..attendance.repository import EntryRepository
from ..auth.tokens import Identity
from ..core.enums import EntryStatus
from ..core.exceptions import AuthorizationError
from ..users.model import User
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardStats:
    total_users: int
    currently_clocked_in: int
    total_records: int

    def to_dict(self) -> dict:
        return {
            "totalUsers": self.total_users,
            "currentlyClockedIn": self.currently_clocked_in,
            "totalRecords": self.total_records,
        }


class ReportService:
    """Read-only views for the admin dashboard and self-service history."""

    def __init__(self, entries: EntryRepository, users: UserRepository):
        self._entries = entries
        self._users = users

    @staticmethod
    def _require_admin(identity: Identity) -> None:
        if not identity.is_admin:
            logger.warning("Admin access denied for %s", identity.username)
            raise AuthorizationError("Admin access required")

    def stats(self, identity: Identity) -> DashboardStats:
        self._require_admin(identity)
        return DashboardStats(
            total_users=self._users.count(),
            currently_clocked_in=self._entries.count(EntryStatus.CLOCKED_IN),
            total_records=self._entries.count(),
        )

    def list_all_entries(self, identity: Identity) -> Sequence[TimeEntry]:
        self._require_admin(identity)
        return self._entries.list_entries()

    def list_entries_for(self, identity: Identity, username: str) -> Sequence[TimeEntry]:
        if not identity.is_admin and identity.username != username:
            logger.warning("%s denied access to entries of %s", identity.username, username)
            raise AuthorizationError("Access denied")
        return self._entries.list_entries(username)

    def list_users(self, identity: Identity) -> Sequence[User]:
        self._require_admin(identity)
        return self._users.list_all()
