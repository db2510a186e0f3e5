"""Create the first admin account.

Signup never grants admin rights, so the initial admin comes from here:

    ADMIN_USERNAME=boss ADMIN_PASSWORD=... ADMIN_EMAIL=boss@example.com python scripts/seed_db.py
"""

from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv
from werkzeug.security import generate_password_hash

from config import get_settings_module

from src.time_tracker.time_tracker.core.exceptions import ConflictError
from src.time_tracker.time_tracker.database.bootstrap import ensure_indexes
from src.time_tracker.time_tracker.database.connection import DBConfig, DatabaseConnection
from src.time_tracker.time_tracker.users.mongo_user_repository import MongoUserRepository


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    username = os.getenv("ADMIN_USERNAME", "admin")
    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        raise SystemExit("ADMIN_PASSWORD is not set")

    conn = DatabaseConnection(DBConfig(uri=db_config["uri"], database=db_config["database"]))
    try:
        ensure_indexes(conn)
        users = MongoUserRepository(conn)
        try:
            users.create_user(
                first_name=os.getenv("ADMIN_FIRST_NAME", "Admin"),
                last_name=os.getenv("ADMIN_LAST_NAME", "User"),
                email=os.getenv("ADMIN_EMAIL", f"{username}@localhost"),
                username=username,
                password_hash=generate_password_hash(password),
                is_admin=True,
            )
        except ConflictError:
            print(f"SKIP: user {username!r} (or its email) already exists")
            return
    finally:
        conn.close()

    print(f"OK: admin {username!r} created in {db_config['database']}")


if __name__ == "__main__":
    main()
