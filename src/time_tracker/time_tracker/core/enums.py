from __future__ import annotations

from enum import Enum


class EntryStatus(str, Enum):
    """Status of a time entry as stored in the database."""

    CLOCKED_IN = "Clocked In"
    CLOCKED_OUT = "Clocked Out"


class ClockAction(str, Enum):
    """Action taken by a clock toggle."""

    CLOCK_IN = "clockIn"
    CLOCK_OUT = "clockOut"
