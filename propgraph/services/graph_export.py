"""
Graph Export
Converts a GraphStore into networkx structures for visualisation or offline analysis.
"""
import logging
from typing import Any, Dict

import networkx as nx
from networkx.readwrite import json_graph

from propgraph.core.graph_store import GraphStore

logger = logging.getLogger(__name__)


def to_networkx(store: GraphStore) -> nx.MultiDiGraph:
    """
    Copy the graph into a MultiDiGraph.

    Nodes are keyed by node id with `labels`/`properties` attributes; edges
    are keyed by edge id with `type`/`properties` attributes. Attribute
    values are copies, so mutating the result leaves the store untouched.
    """
    graph = nx.MultiDiGraph()

    for node in store.get_all_nodes():
        graph.add_node(node.id, labels=list(node.labels), properties=dict(node.properties))

    for edge in store.get_all_edges():
        graph.add_edge(
            edge.from_id,
            edge.to_id,
            key=edge.id,
            type=edge.type,
            properties=dict(edge.properties),
        )

    logger.debug(f"[Export] {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges")
    return graph


def to_node_link_data(store: GraphStore) -> Dict[str, Any]:
    """
    Whole graph as node-link JSON data.

    Returns:
        {"nodes": [...], "links": [...], ...}
    """
    return json_graph.node_link_data(to_networkx(store), edges="links")
