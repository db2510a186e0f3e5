from __future__ import annotations

import logging
from datetime import datetime

from ..auth.tokens import Identity
from ..common.datetime_utils import format_entry_date, now_local
from ..core.enums import ClockAction, EntryStatus
from ..core.exceptions import ConcurrentClockError, NotFoundError
from ..users.repository import UserRepository
from .model import ClockResult, TimeEntry
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock toggle: Out -> In creates an entry, In -> Out closes it.

    The action is decided from the stored state only. Both writes are
    conditional at the store (unique active entry per user, compare-and-swap on
    status), so a request that loses a race gets ConcurrentClockError.
    """

    def __init__(self, entries: EntryRepository, users: UserRepository):
        self._entries = entries
        self._users = users

    def toggle(self, identity: Identity, *, now: datetime | None = None) -> ClockResult:
        user = self._users.get_by_username(identity.username)
        if not user:
            raise NotFoundError("User not found")

        now = now or now_local()
        active = self._entries.find_active(user.username)

        if active is None:
            entry = self._entries.create(
                TimeEntry(
                    entry_id=None,
                    username=user.username,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    clock_in=now,
                    date=format_entry_date(now),
                    status=EntryStatus.CLOCKED_IN,
                )
            )
            logger.info("%s clocked in", user.username)
            return ClockResult(
                action=ClockAction.CLOCK_IN,
                entry=entry,
                message=f"Clocked In Successfully!\n{user.full_name}",
            )

        closed = active.closed_at(now)
        if not self._entries.update(closed):
            raise ConcurrentClockError("Already clocked out")

        logger.info("%s clocked out after %.2f hours", user.username, closed.hours_worked)
        return ClockResult(
            action=ClockAction.CLOCK_OUT,
            entry=closed,
            message=f"Clocked Out Successfully!\n{user.full_name}",
        )
