from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from ..core.constants import DEFAULT_MONGO_TIMEOUT_MS


@dataclass
class MongoConfig:
    uri: str
    database: str
    timeout_ms: int = DEFAULT_MONGO_TIMEOUT_MS


class DatabaseConnection:
    """Singleton-like MongoDB client holder.

    Note: MongoClient keeps its own connection pool, so one client per process is enough.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: MongoConfig, *, client: Optional[MongoClient] = None):
        self._config = config
        self._client = client

    @classmethod
    def get_instance(cls, config: MongoConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            # Connecting is lazy; the first operation performs server selection.
            self._client = MongoClient(self._config.uri, serverSelectionTimeoutMS=int(self._config.timeout_ms))
        return self._client

    def db(self) -> Database:
        return self.client[self._config.database]
