"""
propgraph
In-memory property graph store: labeled nodes, typed directed edges,
referential integrity and one-hop structural queries.
"""
from propgraph.models import Node, Edge, QueryResult, Properties
from propgraph.builders import NodeBuilder
from propgraph.core import GraphStore, GraphDatabase
from propgraph.shared.error_framework import (
    GraphError,
    NodeValidationError,
    ReferentialIntegrityError,
    DuplicateNodeError,
    StorageError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    "Node",
    "Edge",
    "QueryResult",
    "Properties",
    "NodeBuilder",
    "GraphStore",
    "GraphDatabase",
    "GraphError",
    "NodeValidationError",
    "ReferentialIntegrityError",
    "DuplicateNodeError",
    "StorageError",
    "ConfigError",
]
