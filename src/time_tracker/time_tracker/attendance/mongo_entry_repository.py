from __future__ import annotations

from typing import Any, Optional, Sequence

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from ..core.constants import ENTRIES_COLLECTION
from ..core.enums import EntryStatus
from ..core.exceptions import ConcurrentClockError
from ..database.connection import DatabaseConnection
from .model import TimeEntry
from .repository import EntryRepository


def _to_entry(doc: dict[str, Any]) -> TimeEntry:
    hours = doc.get("hoursWorked")
    return TimeEntry(
        entry_id=str(doc["_id"]),
        username=doc["username"],
        first_name=doc["firstName"],
        last_name=doc["lastName"],
        clock_in=doc["clockIn"],
        date=doc["date"],
        status=EntryStatus(doc.get("status", EntryStatus.CLOCKED_IN.value)),
        clock_out=doc.get("clockOut"),
        hours_worked=float(hours) if hours is not None else None,
    )


class MongoEntryRepository(EntryRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _entries(self):
        return self._conn.collection(ENTRIES_COLLECTION)

    def create(self, entry: TimeEntry) -> TimeEntry:
        doc: dict[str, Any] = {
            "username": entry.username,
            "firstName": entry.first_name,
            "lastName": entry.last_name,
            "clockIn": entry.clock_in,
            "date": entry.date,
            "status": entry.status.value,
        }
        try:
            result = self._entries.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ConcurrentClockError("Already clocked in") from exc
        doc["_id"] = result.inserted_id
        return _to_entry(doc)

    def find_active(self, username: str) -> Optional[TimeEntry]:
        doc = self._entries.find_one({"username": username, "status": EntryStatus.CLOCKED_IN.value})
        return _to_entry(doc) if doc else None

    def update(self, entry: TimeEntry) -> bool:
        if entry.entry_id is None:
            return False
        try:
            oid = ObjectId(entry.entry_id)
        except InvalidId:
            return False

        result = self._entries.update_one(
            {"_id": oid, "status": EntryStatus.CLOCKED_IN.value},
            {
                "$set": {
                    "clockOut": entry.clock_out,
                    "status": entry.status.value,
                    "hoursWorked": entry.hours_worked,
                }
            },
        )
        return result.modified_count == 1

    def list_entries(self, username: Optional[str] = None) -> Sequence[TimeEntry]:
        query = {"username": username} if username is not None else {}
        cursor = self._entries.find(query).sort("clockIn", DESCENDING)
        return [_to_entry(doc) for doc in cursor]

    def count(self, status: Optional[EntryStatus] = None) -> int:
        query = {"status": status.value} if status is not None else {}
        return int(self._entries.count_documents(query))
