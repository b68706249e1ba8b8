# Services
from propgraph.services.graph_export import to_networkx, to_node_link_data

__all__ = ["to_networkx", "to_node_link_data"]
