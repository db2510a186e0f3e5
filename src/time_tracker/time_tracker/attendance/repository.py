from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EntryStatus
from .model import TimeEntry


class EntryRepository(Protocol):
    def create(self, entry: TimeEntry) -> TimeEntry:
        """Insert a new entry and return it with its id.

        Raises ConcurrentClockError when the user already has an active entry.
        """

        raise NotImplementedError

    def find_active(self, username: str) -> Optional[TimeEntry]:
        raise NotImplementedError

    def update(self, entry: TimeEntry) -> bool:
        """Persist clock-out fields, only if the stored entry is still active.

        Returns False when the entry was already clocked out (or is gone).
        """

        raise NotImplementedError

    def list_entries(self, username: Optional[str] = None) -> Sequence[TimeEntry]:
        """Entries ordered by clock-in time, newest first."""

        raise NotImplementedError

    def count(self, status: Optional[EntryStatus] = None) -> int:
        raise NotImplementedError
