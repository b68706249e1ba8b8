"""
Constants
Values that never change at runtime.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class IdPrefixes:
    """Identifier derivation"""
    NODE: str = "n"
    EDGE: str = "e"
    REVERSED_EDGE_SUFFIX: str = "_reversed"


@dataclass(frozen=True)
class LogMessages:
    """Standard log message formats"""
    # Graph
    NODE_CREATED = "[Graph] Created node {} labels={}"
    NODE_ADDED = "[Graph] Added node {}"
    NODE_DELETED = "[Graph] Deleted node {} (cascaded {} edges)"
    EDGE_CREATED = "[Graph] Created edge {} {}-[{}]->{}"
    EDGE_DELETED = "[Graph] Deleted edge {}"
    GRAPH_CLEARED = "[Graph] Cleared {} nodes and {} edges"

    # Storage
    STORE_CONNECTED = "[Store] Connected to {}"
    STORE_DISCONNECTED = "[Store] Disconnected from {}"
    RECORD_SAVED = "[Store] Record {} saved to table {}"
    RECORD_UPDATED = "[Store] Record {} updated in table {}"
    RECORD_DELETED = "[Store] Record {} deleted from table {}"
