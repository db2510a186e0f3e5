from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    uri: str
    database: str
    server_selection_timeout_ms: int = 5000


class DatabaseConnection:
    """Owns the MongoDB client for one application instance.

    Built explicitly by the container and passed to repositories. The client is
    created on first use (pymongo pools connections internally) and released by
    ``close()``.
    """

    def __init__(self, config: DBConfig, *, client_factory: Callable[..., MongoClient] = MongoClient):
        self._config = config
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self._lock = threading.Lock()

    def connect(self) -> MongoClient:
        with self._lock:
            if self._client is None:
                self._client = self._client_factory(
                    self._config.uri,
                    serverSelectionTimeoutMS=self._config.server_selection_timeout_ms,
                )
                logger.info("MongoDB client created for database %r", self._config.database)
            return self._client

    @property
    def db(self) -> Database:
        return self.connect()[self._config.database]

    def collection(self, name: str) -> Collection:
        return self.db[name]

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
                logger.info("MongoDB client closed")
