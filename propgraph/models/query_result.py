"""
QueryResult
Snapshot bundle of nodes and edges returned by GraphDatabase queries.

The lists are new per query, but their elements are the live Node/Edge
objects owned by the database.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from propgraph.models.node import Node
from propgraph.models.edge import Edge
from propgraph.shared.formatting import unique_in_order


@dataclass
class QueryResult:
    nodes: List[Node]
    edges: List[Edge] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        """Only nodes count; an edge-only result is empty"""
        return len(self.nodes) == 0

    def get_nodes_by_label(self, label: str) -> List[Node]:
        return [node for node in self.nodes if node.has_label(label)]

    def get_edges_by_type(self, edge_type: str) -> List[Edge]:
        return [edge for edge in self.edges if edge.type == edge_type]

    def get_node_by_id(self, node_id: str) -> Optional[Node]:
        return next((node for node in self.nodes if node.id == node_id), None)

    def get_edge_by_id(self, edge_id: str) -> Optional[Edge]:
        return next((edge for edge in self.edges if edge.id == edge_id), None)

    def __str__(self) -> str:
        node_labels = unique_in_order(label for node in self.nodes for label in node.labels)
        edge_types = unique_in_order(edge.type for edge in self.edges)

        return (
            "QueryResult(\n"
            f"  Nodes: {self.node_count}\n"
            f"  Node Labels: [{', '.join(node_labels)}]\n"
            f"  Edges: {self.edge_count}\n"
            f"  Edge Types: [{', '.join(edge_types)}]\n"
            ")"
        )
