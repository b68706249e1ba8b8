"""
Edge
A directed, typed relationship between two node ids.

The edge holds identifiers, never node objects; keeping endpoints valid is
the owning GraphDatabase's job.
"""
import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from propgraph.config.constants import IdPrefixes
from propgraph.models.node import Properties
from propgraph.shared.formatting import compact_json


@dataclass
class Edge:
    """Directed edge from_id -> to_id"""
    id: str
    type: str
    from_id: str
    to_id: str
    properties: Properties = field(default_factory=dict)

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def set_property(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def connects(self, from_id: str, to_id: str) -> bool:
        """Exact directional match"""
        return self.from_id == from_id and self.to_id == to_id

    def involves_node(self, node_id: str) -> bool:
        return self.from_id == node_id or self.to_id == node_id

    def get_other_node(self, node_id: str) -> Optional[str]:
        """The endpoint that is not node_id, or None if node_id is neither"""
        if self.from_id == node_id:
            return self.to_id
        if self.to_id == node_id:
            return self.from_id
        return None

    def reverse(self) -> "Edge":
        # The derived id is not allocated by any database and can collide
        # with another "<id>_reversed" edge.
        return Edge(
            id=f"{self.id}{IdPrefixes.REVERSED_EDGE_SUFFIX}",
            type=self.type,
            from_id=self.to_id,
            to_id=self.from_id,
            properties=dict(self.properties),
        )

    def clone(self) -> "Edge":
        return Edge(
            id=self.id,
            type=self.type,
            from_id=self.from_id,
            to_id=self.to_id,
            properties=copy.deepcopy(self.properties),
        )

    def __str__(self) -> str:
        return f"Edge({self.id}, {self.from_id}-[{self.type}]->{self.to_id}, {compact_json(self.properties)})"
