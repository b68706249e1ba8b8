# Graph models
from propgraph.models.node import Node, Properties
from propgraph.models.edge import Edge
from propgraph.models.query_result import QueryResult

__all__ = [
    "Node",
    "Edge",
    "QueryResult",
    "Properties",
]
