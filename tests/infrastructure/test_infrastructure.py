"""Infrastructure tests: settings, error framework, graph export"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import networkx as nx

from propgraph.config.settings import Settings, get_settings
from propgraph.core import GraphDatabase
from propgraph.services import to_networkx, to_node_link_data
from propgraph.shared.error_framework import (
    ConfigError, ErrorCategory, ErrorRegistry, ErrorSeverity, GraphError,
    ReferentialIntegrityError, StorageError, get_error_registry,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.graph.node_id_prefix == "n"
        assert settings.graph.edge_id_prefix == "e"
        assert settings.store.backend == "json"
        assert settings.store.node_table == "nodes"

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_load_shipped_yaml(self):
        config = Settings().load_yaml_config("infrastructure")
        assert config["graph"]["node_id_prefix"] == "n"
        assert config["storage"]["backend"] == "json"

    def test_missing_yaml(self, tmp_path):
        settings = Settings(config_dir=tmp_path)
        with pytest.raises(FileNotFoundError):
            settings.load_yaml_config("infrastructure")


class TestErrorFramework:
    def test_integrity_error(self):
        error = ReferentialIntegrityError(
            "Source node x does not exist",
            endpoint="source",
            node_id="x",
        )

        assert isinstance(error, GraphError)
        assert error.severity == ErrorSeverity.MEDIUM
        assert error.retryable is False

        d = error.to_dict()
        assert d["category"] == "integrity"
        assert d["context"]["extra"]["endpoint"] == "source"

    def test_storage_error_cause(self):
        cause = OSError("disk full")
        error = StorageError("Write failed", operation="save", table="nodes", cause=cause)

        assert error.category == ErrorCategory.STORAGE
        assert error.to_dict()["cause"] == "disk full"

    def test_config_error_is_critical(self):
        assert ConfigError("bad", config_key="x").severity == ErrorSeverity.CRITICAL

    def test_error_registry(self):
        registry = ErrorRegistry(max_size=2)
        for i in range(3):
            registry.record(StorageError(f"error {i}", operation="test"))

        recent = registry.get_recent(10)
        assert [e["message"] for e in recent] == ["error 1", "error 2"]
        assert registry.get_stats()["total"] == 2
        assert len(registry.get_by_category(ErrorCategory.STORAGE)) == 2

        registry.clear()
        assert registry.get_stats()["total"] == 0

    def test_global_registry(self):
        assert get_error_registry() is get_error_registry()


class TestGraphExport:
    def _graph(self):
        db = GraphDatabase()
        a = db.create_node(["Person"], {"name": "Alice"})
        b = db.create_node(["Person"], {"name": "Bob"})
        db.create_edge("KNOWS", a.id, b.id, {"since": 2020})
        db.create_edge("LIKES", a.id, b.id)
        return db

    def test_to_networkx(self):
        graph = to_networkx(self._graph())

        assert isinstance(graph, nx.MultiDiGraph)
        assert graph.number_of_nodes() == 2
        assert graph.number_of_edges() == 2
        assert graph.nodes["n0"]["labels"] == ["Person"]
        assert graph.edges["n0", "n1", "e0"]["type"] == "KNOWS"
        assert graph.edges["n0", "n1", "e0"]["properties"] == {"since": 2020}

    def test_export_is_a_copy(self):
        db = self._graph()
        graph = to_networkx(db)
        graph.nodes["n0"]["properties"]["name"] = "Mallory"

        assert db.get_node("n0").get_property("name") == "Alice"

    def test_node_link_data(self):
        data = to_node_link_data(self._graph())

        assert [n["id"] for n in data["nodes"]] == ["n0", "n1"]
        assert sorted(link["key"] for link in data["links"]) == ["e0", "e1"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
