"""
Record projections
Flat, validated shapes of Node and Edge for record stores.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from propgraph.models import Node, Edge


class NodeRecord(BaseModel):
    """Stored form of a Node"""
    id: str = Field(..., description="Node id")
    labels: List[str] = Field(default_factory=list)
    properties: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_node(cls, node: Node) -> "NodeRecord":
        return cls(id=node.id, labels=list(node.labels), properties=dict(node.properties))

    def to_node(self) -> Node:
        return Node(self.id, list(self.labels), dict(self.properties))

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


class EdgeRecord(BaseModel):
    """Stored form of an Edge; endpoints serialize as "from"/"to"."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Edge id")
    type: str = Field(..., description="Relationship type")
    from_id: str = Field(..., alias="from")
    to_id: str = Field(..., alias="to")
    properties: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_edge(cls, edge: Edge) -> "EdgeRecord":
        return cls(
            id=edge.id,
            type=edge.type,
            from_id=edge.from_id,
            to_id=edge.to_id,
            properties=dict(edge.properties),
        )

    def to_edge(self) -> Edge:
        return Edge(self.id, self.type, self.from_id, self.to_id, dict(self.properties))

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
