from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.time_tracker.time_tracker.database.bootstrap import ensure_indexes, list_collections
from src.time_tracker.time_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    if not db_config.get("uri"):
        raise SystemExit("MONGODB_URI is not set")

    conn = DatabaseConnection(DBConfig(uri=db_config["uri"], database=db_config["database"]))
    try:
        indexes = ensure_indexes(conn)
        collections = list_collections(conn)
    finally:
        conn.close()

    print(f"OK: indexes ready on {db_config['database']} ({len(indexes)} indexes, collections={collections})")


if __name__ == "__main__":
    main()
