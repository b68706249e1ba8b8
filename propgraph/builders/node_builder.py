"""
NodeBuilder
Fluent accumulator producing a validated Node.

    node = (
        NodeBuilder()
        .with_id("alice")
        .add_labels("Person", "Employee")
        .add_property("name", "Alice")
        .build()
    )

build() does not reset the builder; call reset() to reuse it.
"""
from typing import Any, Dict, List, Optional

from propgraph.models.node import Node, Properties
from propgraph.shared.error_framework import NodeValidationError


class NodeBuilder:

    def __init__(self) -> None:
        self._id: Optional[str] = None
        self._labels: List[str] = []
        self._properties: Properties = {}

    def with_id(self, node_id: str) -> "NodeBuilder":
        self._id = node_id
        return self

    def add_label(self, label: str) -> "NodeBuilder":
        if label not in self._labels:
            self._labels.append(label)
        return self

    def add_labels(self, *labels: str) -> "NodeBuilder":
        for label in labels:
            self.add_label(label)
        return self

    def with_labels(self, labels: List[str]) -> "NodeBuilder":
        """Replace the label list verbatim (no dedup)"""
        self._labels = list(labels)
        return self

    def add_property(self, key: str, value: Any) -> "NodeBuilder":
        self._properties[key] = value
        return self

    def add_properties(self, properties: Dict[str, Any]) -> "NodeBuilder":
        """Shallow merge, incoming keys win"""
        self._properties = {**self._properties, **properties}
        return self

    def with_properties(self, properties: Dict[str, Any]) -> "NodeBuilder":
        self._properties = dict(properties)
        return self

    def build(self) -> Node:
        if not self._id:
            raise NodeValidationError("Node ID is required", missing_field="id")

        return Node(
            id=self._id,
            labels=list(self._labels),
            properties=dict(self._properties),
        )

    def reset(self) -> "NodeBuilder":
        self._id = None
        self._labels = []
        self._properties = {}
        return self

    @classmethod
    def from_node(cls, node: Node) -> "NodeBuilder":
        """Seed a builder with copies of an existing node's state"""
        return (
            cls()
            .with_id(node.id)
            .with_labels(list(node.labels))
            .with_properties(dict(node.properties))
        )
