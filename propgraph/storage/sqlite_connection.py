"""
SQLite Connection
Each table is (id TEXT PRIMARY KEY, data TEXT) with the record stored as JSON.
"""
import json
import logging
import re
import sqlite3
from pathlib import Path
from typing import List, Optional, Union

from propgraph.config.constants import LogMessages
from propgraph.shared.error_framework import StorageError
from propgraph.storage.connection import DatabaseConnection, Record

logger = logging.getLogger(__name__)

# Table names are interpolated into SQL
_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SQLiteConnection(DatabaseConnection):

    def __init__(self, db_path: Union[str, Path] = "graph_records.db"):
        self._db_path = str(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        if self._db_path != ":memory:":
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(self._db_path)
        except sqlite3.Error as e:
            raise StorageError(
                f"Failed to open SQLite database: {self._db_path}",
                operation="connect",
                cause=e,
            )
        logger.info(LogMessages.STORE_CONNECTED.format(self._db_path))

    def disconnect(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info(LogMessages.STORE_DISCONNECTED.format(self._db_path))

    def create_table(self, table: str) -> None:
        self._execute(
            "create_table", table,
            f"CREATE TABLE IF NOT EXISTS {table} (id TEXT PRIMARY KEY, data TEXT)",
        )

    def save(self, table: str, record: Record) -> None:
        self.create_table(table)
        self._execute(
            "save", table,
            f"INSERT OR REPLACE INTO {table} (id, data) VALUES (?, ?)",
            (record.get("id"), json.dumps(record, ensure_ascii=False, default=str)),
        )
        logger.debug(LogMessages.RECORD_SAVED.format(record.get("id"), table))

    def find(self, table: str, record_id: str) -> Optional[Record]:
        if not self._table_exists(table):
            return None
        rows = self._execute(
            "find", table,
            f"SELECT data FROM {table} WHERE id = ?",
            (record_id,),
        )
        return json.loads(rows[0][0]) if rows else None

    def update(self, table: str, record_id: str, record: Record) -> None:
        self._execute(
            "update", table,
            f"UPDATE {table} SET data = ? WHERE id = ?",
            (json.dumps(record, ensure_ascii=False, default=str), record_id),
        )
        logger.debug(LogMessages.RECORD_UPDATED.format(record_id, table))

    def delete(self, table: str, record_id: str) -> None:
        self._execute(
            "delete", table,
            f"DELETE FROM {table} WHERE id = ?",
            (record_id,),
        )
        logger.debug(LogMessages.RECORD_DELETED.format(record_id, table))

    def _table_exists(self, table: str) -> bool:
        rows = self._execute(
            "find", table,
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
            (table,),
        )
        return len(rows) > 0

    def _execute(self, operation: str, table: str, sql: str, params: tuple = ()) -> List[tuple]:
        if self._conn is None:
            raise StorageError("Not connected", operation=operation)
        if not _TABLE_NAME.match(table):
            raise StorageError(
                f"Invalid table name: {table}",
                operation=operation,
                table=table,
            )
        try:
            with self._conn:
                return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StorageError(
                f"SQLite {operation} failed on table {table}: {e}",
                operation=operation,
                table=table,
                cause=e,
            )
