"""
Database Connection - abstract interface
Record-level CRUD against a named table. Records are dicts keyed by "id".
Graph logic never lives here.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from propgraph.shared.error_framework import ConfigError

Record = Dict[str, Any]


class DatabaseConnection(ABC):
    """Record store interface"""

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        ...

    @abstractmethod
    def connect(self) -> None:
        ...

    @abstractmethod
    def disconnect(self) -> None:
        ...

    @abstractmethod
    def create_table(self, table: str) -> None:
        """Create the table if it does not exist"""
        ...

    @abstractmethod
    def save(self, table: str, record: Record) -> None:
        """Insert, or replace the record with the same id"""
        ...

    @abstractmethod
    def find(self, table: str, record_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    def update(self, table: str, record_id: str, record: Record) -> None:
        ...

    @abstractmethod
    def delete(self, table: str, record_id: str) -> None:
        ...

    def __enter__(self) -> "DatabaseConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()


class ConnectionFactory:
    """
    Creates a DatabaseConnection by backend name.

        conn = ConnectionFactory.create_connection("sqlite", db_path="graph.db")
    """

    BACKENDS = ("json", "sqlite")

    @staticmethod
    def create_connection(backend: str, **options: Any) -> DatabaseConnection:
        if backend == "json":
            from propgraph.storage.json_connection import JSONConnection
            return JSONConnection(**options)

        elif backend == "sqlite":
            from propgraph.storage.sqlite_connection import SQLiteConnection
            return SQLiteConnection(**options)

        raise ConfigError(
            f"Unknown storage backend: {backend} (expected one of {', '.join(ConnectionFactory.BACKENDS)})",
            config_key="storage.backend",
        )
