from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import hours_between, isoformat_or_none
from ..core.enums import ClockAction, EntryStatus


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/clock-out record.

    ``first_name``/``last_name`` are copies of the user's name at clock-in time.
    """

    entry_id: Optional[str]
    username: str
    first_name: str
    last_name: str
    clock_in: datetime
    date: str
    status: EntryStatus = EntryStatus.CLOCKED_IN
    clock_out: Optional[datetime] = None
    hours_worked: Optional[float] = None

    def closed_at(self, clock_out: datetime) -> "TimeEntry":
        """Return this entry clocked out at ``clock_out``."""
        clock_out = max(clock_out, self.clock_in)
        return replace(
            self,
            clock_out=clock_out,
            status=EntryStatus.CLOCKED_OUT,
            hours_worked=hours_between(self.clock_in, clock_out),
        )

    def to_dict(self) -> dict:
        return {
            "_id": self.entry_id,
            "username": self.username,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "clockIn": isoformat_or_none(self.clock_in),
            "clockOut": isoformat_or_none(self.clock_out),
            "date": self.date,
            "status": self.status.value,
            "hoursWorked": self.hours_worked,
        }


@dataclass(frozen=True)
class ClockResult:
    action: ClockAction
    entry: TimeEntry
    message: str

    def to_dict(self) -> dict:
        return {"action": self.action.value, "entry": self.entry.to_dict(), "message": self.message}
