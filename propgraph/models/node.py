"""
Node
A labeled, keyed property bag.
"""
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List

from propgraph.shared.formatting import compact_json, unique_in_order

Properties = Dict[str, Any]


@dataclass
class Node:
    """
    Graph node.

    Labels keep insertion order and never repeat; a repeated label passed to
    the constructor is dropped after its first occurrence.
    """
    id: str
    labels: List[str] = field(default_factory=list)
    properties: Properties = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.labels = unique_in_order(self.labels)

    def has_label(self, label: str) -> bool:
        return label in self.labels

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def set_property(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def add_label(self, label: str) -> None:
        if label not in self.labels:
            self.labels.append(label)

    def remove_label(self, label: str) -> None:
        if label in self.labels:
            self.labels.remove(label)

    def clone(self) -> "Node":
        """Copy sharing nothing mutable with this node"""
        return Node(
            id=self.id,
            labels=list(self.labels),
            properties=copy.deepcopy(self.properties),
        )

    def __str__(self) -> str:
        return f"Node({self.id}, [{', '.join(self.labels)}], {compact_json(self.properties)})"
