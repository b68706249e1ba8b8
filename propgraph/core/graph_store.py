"""
Graph Store - abstract interface
Minimal operation set that graph consumers depend on.
Node/edge lifecycle plus one-hop structural queries, nothing more.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from propgraph.models import Node, Edge, QueryResult


class GraphStore(ABC):
    """Property graph store interface"""

    @abstractmethod
    def create_node(
        self,
        labels: List[str],
        properties: Optional[Dict[str, Any]] = None,
    ) -> Node:
        """Create a node with an auto-assigned id"""
        ...

    @abstractmethod
    def add_node(self, node: Node) -> Node:
        """Register an externally built node under its own id"""
        ...

    @abstractmethod
    def create_edge(
        self,
        edge_type: str,
        from_id: str,
        to_id: str,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Edge:
        """Create a directed edge between two registered nodes"""
        ...

    @abstractmethod
    def get_node(self, node_id: str) -> Optional[Node]:
        ...

    @abstractmethod
    def get_edge(self, edge_id: str) -> Optional[Edge]:
        ...

    @abstractmethod
    def get_all_nodes(self) -> List[Node]:
        ...

    @abstractmethod
    def get_all_edges(self) -> List[Edge]:
        ...

    @abstractmethod
    def get_edges_from(self, node_id: str) -> List[Edge]:
        """Outgoing edges"""
        ...

    @abstractmethod
    def get_edges_to(self, node_id: str) -> List[Edge]:
        """Incoming edges"""
        ...

    @abstractmethod
    def get_edges_for_node(self, node_id: str) -> List[Edge]:
        """Edges with node_id at either end"""
        ...

    @abstractmethod
    def delete_node(self, node_id: str) -> bool:
        """Delete a node and every edge touching it"""
        ...

    @abstractmethod
    def delete_edge(self, edge_id: str) -> bool:
        ...

    @abstractmethod
    def find_nodes_by_label(self, label: str) -> QueryResult:
        ...

    @abstractmethod
    def find_nodes_by_property(self, key: str, value: Any) -> QueryResult:
        ...

    @abstractmethod
    def find_edges_by_type(self, edge_type: str) -> QueryResult:
        ...

    @abstractmethod
    def get_neighbors(self, node_id: str) -> QueryResult:
        """Targets of outgoing edges, with those edges"""
        ...

    @abstractmethod
    def follow_edge_type(self, node_id: str, edge_type: str) -> QueryResult:
        ...

    @abstractmethod
    def are_connected(
        self,
        from_id: str,
        to_id: str,
        edge_type: Optional[str] = None,
    ) -> bool:
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove everything and restart id assignment"""
        ...

    @abstractmethod
    def count_nodes(self) -> int:
        ...

    @abstractmethod
    def count_edges(self) -> int:
        ...
