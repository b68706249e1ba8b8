# Storage Layer
from propgraph.storage.connection import DatabaseConnection, ConnectionFactory, Record
from propgraph.storage.json_connection import JSONConnection
from propgraph.storage.sqlite_connection import SQLiteConnection
from propgraph.storage.records import NodeRecord, EdgeRecord

__all__ = [
    "DatabaseConnection",
    "ConnectionFactory",
    "Record",
    "JSONConnection",
    "SQLiteConnection",
    "NodeRecord",
    "EdgeRecord",
]
