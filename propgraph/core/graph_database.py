"""
In-Memory Graph Database
Owns every Node and Edge by id, assigns ids, and keeps edge endpoints valid.

Single-threaded: no operation locks. Wrap the instance in an external lock
before sharing it across threads.
"""
import logging
from typing import Any, Dict, List, Optional

from propgraph.config.constants import IdPrefixes, LogMessages
from propgraph.core.graph_store import GraphStore
from propgraph.models import Node, Edge, QueryResult
from propgraph.shared.error_framework import (
    DuplicateNodeError,
    ErrorRegistry,
    GraphError,
    ReferentialIntegrityError,
)

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, int, float, bool, bytes, type(None))


def strict_equals(actual: Any, expected: Any) -> bool:
    """
    Identity for containers and objects, value equality for scalars.

    Structurally equal dicts or lists do not match unless they are the same
    object. A bool never equals a number.
    """
    if actual is expected:
        return True
    if not isinstance(actual, _SCALAR_TYPES) or not isinstance(expected, _SCALAR_TYPES):
        return False
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


class GraphDatabase(GraphStore):
    """In-memory property graph (dict based)"""

    def __init__(
        self,
        node_id_prefix: str = IdPrefixes.NODE,
        edge_id_prefix: str = IdPrefixes.EDGE,
        error_registry: Optional[ErrorRegistry] = None,
    ) -> None:
        # node_id -> Node
        self._nodes: Dict[str, Node] = {}

        # edge_id -> Edge
        self._edges: Dict[str, Edge] = {}

        self._node_counter = 0
        self._edge_counter = 0

        self._node_id_prefix = node_id_prefix
        self._edge_id_prefix = edge_id_prefix
        self._error_registry = error_registry

    # ===========================================================================
    # Create
    # ===========================================================================

    def create_node(
        self,
        labels: List[str],
        properties: Optional[Dict[str, Any]] = None,
    ) -> Node:
        # Skip ids already taken through add_node
        node_id = f"{self._node_id_prefix}{self._node_counter}"
        self._node_counter += 1
        while node_id in self._nodes:
            node_id = f"{self._node_id_prefix}{self._node_counter}"
            self._node_counter += 1

        node = Node(node_id, list(labels), dict(properties or {}))
        self._nodes[node_id] = node

        logger.debug(LogMessages.NODE_CREATED.format(node_id, node.labels))
        return node

    def add_node(self, node: Node) -> Node:
        if node.id in self._nodes:
            self._raise(DuplicateNodeError(
                f"Node {node.id} already exists",
                node_id=node.id,
            ))

        self._nodes[node.id] = node
        logger.debug(LogMessages.NODE_ADDED.format(node.id))
        return node

    def create_edge(
        self,
        edge_type: str,
        from_id: str,
        to_id: str,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Edge:
        if from_id not in self._nodes:
            self._raise(ReferentialIntegrityError(
                f"Source node {from_id} does not exist",
                endpoint="source",
                node_id=from_id,
                edge_type=edge_type,
            ))
        if to_id not in self._nodes:
            self._raise(ReferentialIntegrityError(
                f"Target node {to_id} does not exist",
                endpoint="target",
                node_id=to_id,
                edge_type=edge_type,
            ))

        edge_id = f"{self._edge_id_prefix}{self._edge_counter}"
        self._edge_counter += 1

        edge = Edge(edge_id, edge_type, from_id, to_id, dict(properties or {}))
        self._edges[edge_id] = edge

        logger.debug(LogMessages.EDGE_CREATED.format(edge_id, from_id, edge_type, to_id))
        return edge

    def _raise(self, error: GraphError) -> None:
        if self._error_registry is not None:
            self._error_registry.record(error)
        raise error

    # ===========================================================================
    # Read
    # ===========================================================================

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def get_all_nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def get_all_edges(self) -> List[Edge]:
        return list(self._edges.values())

    def get_edges_from(self, node_id: str) -> List[Edge]:
        return [e for e in self._edges.values() if e.from_id == node_id]

    def get_edges_to(self, node_id: str) -> List[Edge]:
        return [e for e in self._edges.values() if e.to_id == node_id]

    def get_edges_for_node(self, node_id: str) -> List[Edge]:
        return [e for e in self._edges.values() if e.involves_node(node_id)]

    def count_nodes(self) -> int:
        return len(self._nodes)

    def count_edges(self) -> int:
        return len(self._edges)

    # ===========================================================================
    # Delete
    # ===========================================================================

    def delete_node(self, node_id: str) -> bool:
        if node_id not in self._nodes:
            return False

        # Collect first, then mutate
        to_remove = [e.id for e in self.get_edges_for_node(node_id)]
        for edge_id in to_remove:
            del self._edges[edge_id]

        del self._nodes[node_id]
        logger.debug(LogMessages.NODE_DELETED.format(node_id, len(to_remove)))
        return True

    def delete_edge(self, edge_id: str) -> bool:
        if edge_id not in self._edges:
            return False

        del self._edges[edge_id]
        logger.debug(LogMessages.EDGE_DELETED.format(edge_id))
        return True

    def clear(self) -> None:
        logger.debug(LogMessages.GRAPH_CLEARED.format(len(self._nodes), len(self._edges)))
        self._nodes.clear()
        self._edges.clear()
        self._node_counter = 0
        self._edge_counter = 0

    # ===========================================================================
    # Query
    # ===========================================================================

    def find_nodes_by_label(self, label: str) -> QueryResult:
        nodes = [n for n in self._nodes.values() if n.has_label(label)]
        return QueryResult(nodes, [])

    def find_nodes_by_property(self, key: str, value: Any) -> QueryResult:
        nodes = [
            n for n in self._nodes.values()
            if n.has_property(key) and strict_equals(n.get_property(key), value)
        ]
        return QueryResult(nodes, [])

    def find_edges_by_type(self, edge_type: str) -> QueryResult:
        edges = [e for e in self._edges.values() if e.type == edge_type]
        return QueryResult([], edges)

    def get_neighbors(self, node_id: str) -> QueryResult:
        return self._traverse(self.get_edges_from(node_id))

    def follow_edge_type(self, node_id: str, edge_type: str) -> QueryResult:
        edges = [e for e in self.get_edges_from(node_id) if e.type == edge_type]
        return self._traverse(edges)

    def _traverse(self, edges: List[Edge]) -> QueryResult:
        nodes = []
        for edge in edges:
            target = self._nodes.get(edge.to_id)
            if target is not None:
                nodes.append(target)
        return QueryResult(nodes, edges)

    def are_connected(
        self,
        from_id: str,
        to_id: str,
        edge_type: Optional[str] = None,
    ) -> bool:
        return any(
            e.to_id == to_id and (edge_type is None or e.type == edge_type)
            for e in self.get_edges_from(from_id)
        )
