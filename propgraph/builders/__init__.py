# Builders
from propgraph.builders.node_builder import NodeBuilder

__all__ = ["NodeBuilder"]
