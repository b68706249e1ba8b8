# Core
from propgraph.core.graph_store import GraphStore
from propgraph.core.graph_database import GraphDatabase, strict_equals

__all__ = [
    "GraphStore",
    "GraphDatabase",
    "strict_equals",
]
