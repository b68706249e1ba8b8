"""
JSON File Connection
Whole file held in memory as {table: [record, ...]}; every mutation rewrites the file.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from propgraph.config.constants import LogMessages
from propgraph.shared.error_framework import StorageError
from propgraph.storage.connection import DatabaseConnection, Record

logger = logging.getLogger(__name__)


class JSONConnection(DatabaseConnection):

    def __init__(self, file_path: Union[str, Path] = "graph_records.json"):
        self._file_path = Path(file_path)
        self._data: Dict[str, List[Record]] = {}
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        if self._file_path.exists():
            try:
                with open(self._file_path, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
            except json.JSONDecodeError as e:
                raise StorageError(
                    f"Corrupt JSON store: {self._file_path}",
                    operation="connect",
                    cause=e,
                )
        else:
            self._data = {}
        self._connected = True
        logger.info(LogMessages.STORE_CONNECTED.format(self._file_path))

    def disconnect(self) -> None:
        if not self._connected:
            return
        self._persist()
        self._data = {}
        self._connected = False
        logger.info(LogMessages.STORE_DISCONNECTED.format(self._file_path))

    def create_table(self, table: str) -> None:
        self._ensure_connected("create_table")
        if table not in self._data:
            self._data[table] = []
            self._persist()

    def save(self, table: str, record: Record) -> None:
        rows = self._table(table, "save")

        index = self._index_of(rows, record.get("id"))
        if index >= 0:
            rows[index] = record
        else:
            rows.append(record)
        self._persist()
        logger.debug(LogMessages.RECORD_SAVED.format(record.get("id"), table))

    def find(self, table: str, record_id: str) -> Optional[Record]:
        self._ensure_connected("find")
        rows = self._data.get(table)
        if rows is None:
            return None

        index = self._index_of(rows, record_id)
        return rows[index] if index >= 0 else None

    def update(self, table: str, record_id: str, record: Record) -> None:
        rows = self._table(table, "update")

        index = self._index_of(rows, record_id)
        if index >= 0:
            rows[index] = {**rows[index], **record}
            self._persist()
            logger.debug(LogMessages.RECORD_UPDATED.format(record_id, table))

    def delete(self, table: str, record_id: str) -> None:
        rows = self._table(table, "delete")

        self._data[table] = [r for r in rows if r.get("id") != record_id]
        self._persist()
        logger.debug(LogMessages.RECORD_DELETED.format(record_id, table))

    def _ensure_connected(self, operation: str) -> None:
        if not self._connected:
            raise StorageError("Not connected", operation=operation)

    def _table(self, table: str, operation: str) -> List[Record]:
        self._ensure_connected(operation)
        if table not in self._data:
            raise StorageError(
                f"Table {table} does not exist",
                operation=operation,
                table=table,
            )
        return self._data[table]

    @staticmethod
    def _index_of(rows: List[Record], record_id: Optional[str]) -> int:
        for i, row in enumerate(rows):
            if row.get("id") == record_id:
                return i
        return -1

    def _persist(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2, default=str)
