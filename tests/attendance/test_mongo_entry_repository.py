from __future__ import annotations

from datetime import datetime

import pytest
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from src.time_tracker.time_tracker.attendance.model import TimeEntry
from src.time_tracker.time_tracker.attendance.mongo_entry_repository import MongoEntryRepository
from src.time_tracker.time_tracker.core.enums import EntryStatus
from src.time_tracker.time_tracker.core.exceptions import ConcurrentClockError


def _entry(**overrides) -> TimeEntry:
    data = dict(
        entry_id=None,
        username="jdoe",
        first_name="John",
        last_name="Doe",
        clock_in=datetime(2026, 1, 5, 8, 30),
        date="Jan 5, 2026",
    )
    data.update(overrides)
    return TimeEntry(**data)


def test_create_inserts_active_entry(fake_conn):
    entries = fake_conn.collection("timeentries")
    new_id = ObjectId()
    entries.insert_one.return_value.inserted_id = new_id

    stored = MongoEntryRepository(fake_conn).create(_entry())

    doc = entries.insert_one.call_args.args[0]
    assert doc["status"] == "Clocked In"
    assert "clockOut" not in doc
    assert stored.entry_id == str(new_id)


def test_create_rejected_by_active_index_raises_concurrent(fake_conn):
    fake_conn.collection("timeentries").insert_one.side_effect = DuplicateKeyError("E11000")

    with pytest.raises(ConcurrentClockError):
        MongoEntryRepository(fake_conn).create(_entry())


def test_update_is_conditional_on_active_status(fake_conn):
    entries = fake_conn.collection("timeentries")
    entries.update_one.return_value.modified_count = 1
    oid = ObjectId()
    closed = _entry(entry_id=str(oid)).closed_at(datetime(2026, 1, 5, 16, 30))

    assert MongoEntryRepository(fake_conn).update(closed) is True

    query, change = entries.update_one.call_args.args
    assert query == {"_id": oid, "status": "Clocked In"}
    assert change["$set"] == {
        "clockOut": datetime(2026, 1, 5, 16, 30),
        "status": "Clocked Out",
        "hoursWorked": 8.0,
    }


def test_update_reports_lost_race(fake_conn):
    fake_conn.collection("timeentries").update_one.return_value.modified_count = 0
    closed = _entry(entry_id=str(ObjectId())).closed_at(datetime(2026, 1, 5, 9, 0))

    assert MongoEntryRepository(fake_conn).update(closed) is False


def test_update_with_malformed_id_is_false(fake_conn):
    closed = _entry(entry_id="not-an-object-id").closed_at(datetime(2026, 1, 5, 9, 0))

    assert MongoEntryRepository(fake_conn).update(closed) is False
    fake_conn.collection("timeentries").update_one.assert_not_called()


def test_list_entries_filters_and_sorts_newest_first(fake_conn):
    entries = fake_conn.collection("timeentries")
    doc = {
        "_id": ObjectId(),
        "username": "jdoe",
        "firstName": "John",
        "lastName": "Doe",
        "clockIn": datetime(2026, 1, 5, 8, 30),
        "clockOut": datetime(2026, 1, 5, 9, 0),
        "date": "Jan 5, 2026",
        "status": "Clocked Out",
        "hoursWorked": 0.5,
    }
    entries.find.return_value.sort.return_value = [doc]

    result = MongoEntryRepository(fake_conn).list_entries("jdoe")

    entries.find.assert_called_once_with({"username": "jdoe"})
    entries.find.return_value.sort.assert_called_once_with("clockIn", DESCENDING)
    assert result[0].status == EntryStatus.CLOCKED_OUT
    assert result[0].hours_worked == 0.5


def test_count_by_status(fake_conn):
    entries = fake_conn.collection("timeentries")
    entries.count_documents.return_value = 3

    assert MongoEntryRepository(fake_conn).count(EntryStatus.CLOCKED_IN) == 3
    entries.count_documents.assert_called_once_with({"status": "Clocked In"})
