"""Index setup for the MongoDB collections.

Safe to run repeatedly: ``create_index`` is a no-op when an identical index
already exists.
"""

from __future__ import annotations

import logging

from pymongo import ASCENDING, DESCENDING

from ..core.constants import ENTRIES_COLLECTION, USERS_COLLECTION
from ..core.enums import EntryStatus
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

ACTIVE_ENTRY_INDEX = "one_active_entry_per_user"


def ensure_indexes(conn: DatabaseConnection) -> list[str]:
    users = conn.collection(USERS_COLLECTION)
    entries = conn.collection(ENTRIES_COLLECTION)

    created = [
        users.create_index([("username", ASCENDING)], unique=True, name="username_unique"),
        users.create_index([("email", ASCENDING)], unique=True, name="email_unique"),
        entries.create_index([("username", ASCENDING), ("clockIn", DESCENDING)], name="username_clock_in"),
        entries.create_index([("clockIn", DESCENDING)], name="clock_in"),
        # At most one "Clocked In" entry per user.
        entries.create_index(
            [("username", ASCENDING)],
            unique=True,
            name=ACTIVE_ENTRY_INDEX,
            partialFilterExpression={"status": EntryStatus.CLOCKED_IN.value},
        ),
    ]
    logger.info("Indexes ready: %s", ", ".join(created))
    return created


def has_active_entry_index(conn: DatabaseConnection) -> bool:
    return ACTIVE_ENTRY_INDEX in conn.collection(ENTRIES_COLLECTION).index_information()


def list_collections(conn: DatabaseConnection) -> list[str]:
    return sorted(conn.db.list_collection_names())
