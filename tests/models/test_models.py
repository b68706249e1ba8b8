"""
Graph model tests (Node, Edge, QueryResult)
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from propgraph.models import Node, Edge, QueryResult


def create_people():
    return [
        Node("n1", ["Person", "Employee"], {"name": "Alice"}),
        Node("n2", ["Person"], {"name": "Bob"}),
        Node("n3", ["Company"], {"name": "Acme Corp"}),
        Node("n4", ["Person", "Manager"], {"name": "Charlie"}),
    ]


def create_relations():
    return [
        Edge("e1", "WORKS_FOR", "n1", "n3"),
        Edge("e2", "WORKS_FOR", "n2", "n3"),
        Edge("e3", "MANAGES", "n4", "n1"),
        Edge("e4", "KNOWS", "n1", "n2"),
    ]


class TestNode:
    """Node tests"""

    def test_labels_and_properties(self):
        node = Node("n1", ["Person"], {"name": "Alice", "age": 30})

        assert node.has_label("Person")
        assert not node.has_label("Company")
        assert node.get_property("name") == "Alice"
        assert node.get_property("missing") is None
        assert node.get_property("missing", "default") == "default"
        assert node.has_property("age")
        assert not node.has_property("email")

    def test_set_property_upserts(self):
        node = Node("n1", [], {})
        node.set_property("name", "Alice")
        node.set_property("name", "Alicia")

        assert node.properties == {"name": "Alicia"}

    def test_add_label_is_idempotent(self):
        once = Node("n1", ["Person"])
        twice = Node("n1", ["Person"])

        once.add_label("Employee")
        twice.add_label("Employee")
        twice.add_label("Employee")

        assert once.labels == twice.labels == ["Person", "Employee"]

    def test_remove_absent_label_is_noop(self):
        node = Node("n1", ["Person", "Employee"])
        node.remove_label("Manager")
        assert node.labels == ["Person", "Employee"]

        node.remove_label("Person")
        assert node.labels == ["Employee"]

    def test_constructor_drops_duplicate_labels(self):
        node = Node("n1", ["Person", "Employee", "Person"])
        assert node.labels == ["Person", "Employee"]

    def test_clone_is_independent(self):
        original = Node("n1", ["Person"], {"name": "Alice", "tags": ["a"]})
        copy = original.clone()

        copy.add_label("Admin")
        copy.set_property("name", "Mallory")
        copy.properties["tags"].append("b")

        assert copy.id == original.id
        assert original.labels == ["Person"]
        assert original.get_property("name") == "Alice"
        assert original.get_property("tags") == ["a"]

    def test_str(self):
        node = Node("n1", ["Person", "Employee"], {"name": "Alice", "age": 30})
        assert str(node) == 'Node(n1, [Person, Employee], {"name":"Alice","age":30})'


class TestEdge:
    """Edge tests"""

    def test_default_properties(self):
        edge = Edge("e1", "KNOWS", "n1", "n2")
        assert edge.properties == {}
        assert not edge.has_property("since")

    def test_property_access(self):
        edge = Edge("e1", "KNOWS", "n1", "n2", {"since": 2020})
        edge.set_property("weight", 0.5)

        assert edge.get_property("since") == 2020
        assert edge.get_property("weight") == 0.5
        assert edge.has_property("weight")

    def test_connects_is_directional(self):
        edge = Edge("e1", "KNOWS", "n1", "n2")
        assert edge.connects("n1", "n2")
        assert not edge.connects("n2", "n1")

    def test_involves_node(self):
        edge = Edge("e1", "KNOWS", "n1", "n2")
        assert edge.involves_node("n1")
        assert edge.involves_node("n2")
        assert not edge.involves_node("n3")

    def test_get_other_node(self):
        edge = Edge("e1", "KNOWS", "n1", "n2")
        assert edge.get_other_node("n1") == "n2"
        assert edge.get_other_node("n2") == "n1"
        assert edge.get_other_node("n3") is None

    def test_reverse(self):
        edge = Edge("e1", "KNOWS", "n1", "n2", {"since": 2020})
        reversed_edge = edge.reverse()

        assert reversed_edge.id == "e1_reversed"
        assert reversed_edge.type == "KNOWS"
        assert reversed_edge.from_id == "n2"
        assert reversed_edge.to_id == "n1"
        assert reversed_edge.properties == {"since": 2020}

        reversed_edge.set_property("since", 1999)
        assert edge.get_property("since") == 2020
        assert edge.from_id == "n1"

    def test_clone_is_independent(self):
        edge = Edge("e1", "KNOWS", "n1", "n2", {"meta": {"source": "import"}})
        copy = edge.clone()
        copy.properties["meta"]["source"] = "manual"
        copy.set_property("since", 2021)

        assert (copy.id, copy.type, copy.from_id, copy.to_id) == ("e1", "KNOWS", "n1", "n2")
        assert edge.properties == {"meta": {"source": "import"}}

    def test_str(self):
        edge = Edge("e0", "FRIENDS_WITH", "n0", "n1", {"since": 2020})
        assert str(edge) == 'Edge(e0, n0-[FRIENDS_WITH]->n1, {"since":2020})'

    def test_str_number_forms(self):
        edge = Edge("e0", "T", "a", "b", {"w": 1.0, "x": float("nan"), "y": [2.5, float("inf")]})
        assert str(edge) == 'Edge(e0, a-[T]->b, {"w":1,"x":null,"y":[2.5,null]})'

    def test_str_empty_properties(self):
        assert str(Edge("e1", "KNOWS", "a", "b")) == "Edge(e1, a-[KNOWS]->b, {})"


class TestQueryResult:
    """QueryResult tests"""

    def test_counts(self):
        result = QueryResult(create_people(), create_relations())
        assert result.node_count == 4
        assert result.edge_count == 4

    def test_default_edges(self):
        result = QueryResult(create_people())
        assert result.edges == []
        assert result.edge_count == 0

    def test_is_empty_ignores_edges(self):
        assert QueryResult([]).is_empty()
        assert QueryResult([], create_relations()).is_empty()
        assert not QueryResult(create_people()).is_empty()

    def test_get_nodes_by_label(self):
        result = QueryResult(create_people(), create_relations())

        assert [n.id for n in result.get_nodes_by_label("Person")] == ["n1", "n2", "n4"]
        assert [n.id for n in result.get_nodes_by_label("Employee")] == ["n1"]
        assert result.get_nodes_by_label("Admin") == []

    def test_get_edges_by_type(self):
        result = QueryResult(create_people(), create_relations())

        assert [e.id for e in result.get_edges_by_type("WORKS_FOR")] == ["e1", "e2"]
        assert result.get_edges_by_type("REPORTS_TO") == []

    def test_lookup_by_id(self):
        result = QueryResult(create_people(), create_relations())

        assert result.get_node_by_id("n2").get_property("name") == "Bob"
        assert result.get_node_by_id("n999") is None
        assert result.get_edge_by_id("e3").type == "MANAGES"
        assert result.get_edge_by_id("e999") is None

    def test_holds_live_references(self):
        people = create_people()
        result = QueryResult(people)

        result.get_node_by_id("n1").set_property("name", "Alicia")
        assert people[0].get_property("name") == "Alicia"

    def test_str(self):
        result = QueryResult(create_people(), create_relations())
        assert str(result) == (
            "QueryResult(\n"
            "  Nodes: 4\n"
            "  Node Labels: [Person, Employee, Company, Manager]\n"
            "  Edges: 4\n"
            "  Edge Types: [WORKS_FOR, MANAGES, KNOWS]\n"
            ")"
        )

    def test_str_empty(self):
        assert str(QueryResult([])) == (
            "QueryResult(\n"
            "  Nodes: 0\n"
            "  Node Labels: []\n"
            "  Edges: 0\n"
            "  Edge Types: []\n"
            ")"
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
