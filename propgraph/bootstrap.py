"""
Bootstrap / Dependency Injection
Builds the graph database and record store from configuration.
"""
import os
import yaml
import logging
from typing import Optional

from propgraph.config.settings import get_settings
from propgraph.core.graph_database import GraphDatabase
from propgraph.shared.error_framework import get_error_registry
from propgraph.storage.connection import ConnectionFactory, DatabaseConnection

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str] = None) -> dict:
    """Load the infrastructure config"""
    settings = get_settings()
    if config_path is None:
        config_path = settings.get_config_path("infrastructure")

    if not os.path.exists(config_path):
        logger.warning(f"Config not found: {config_path}, using defaults")
        return {
            "graph": settings.graph.model_dump(),
            "storage": {"backend": settings.store.backend},
        }

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    config = _substitute_env_vars(config)
    return config


def _substitute_env_vars(config):
    """Replace "${VAR}" strings with environment values"""
    if isinstance(config, dict):
        return {k: _substitute_env_vars(v) for k, v in config.items()}
    elif isinstance(config, list):
        return [_substitute_env_vars(v) for v in config]
    elif isinstance(config, str) and config.startswith("${") and config.endswith("}"):
        var_name = config[2:-1]
        return os.environ.get(var_name, "")
    return config


# ==============================================================================
# GraphDatabase
# ==============================================================================

def build_graph_database(config: Optional[dict] = None) -> GraphDatabase:
    """Create a GraphDatabase instance"""
    if config is None:
        config = load_config()

    defaults = get_settings().graph
    graph_config = config.get("graph", {})
    node_prefix = graph_config.get("node_id_prefix", defaults.node_id_prefix)
    edge_prefix = graph_config.get("edge_id_prefix", defaults.edge_id_prefix)

    logger.info(f"Using in-memory GraphDatabase (node prefix={node_prefix!r}, edge prefix={edge_prefix!r})")
    return GraphDatabase(
        node_id_prefix=node_prefix,
        edge_id_prefix=edge_prefix,
        error_registry=get_error_registry(),
    )


_graph_db: Optional[GraphDatabase] = None


def get_graph_database() -> GraphDatabase:
    """Singleton GraphDatabase"""
    global _graph_db
    if _graph_db is None:
        _graph_db = build_graph_database()
    return _graph_db


# ==============================================================================
# Record store
# ==============================================================================

def build_connection(config: Optional[dict] = None) -> DatabaseConnection:
    """Create a (not yet connected) DatabaseConnection"""
    if config is None:
        config = load_config()

    store_defaults = get_settings().store
    storage_config = config.get("storage", {})
    backend = storage_config.get("backend", store_defaults.backend)

    if backend == "json":
        path = storage_config.get("json", {}).get("path", store_defaults.json_path)
        logger.info(f"Using JSON record store: {path}")
        return ConnectionFactory.create_connection("json", file_path=path)

    elif backend == "sqlite":
        path = storage_config.get("sqlite", {}).get("path", store_defaults.sqlite_path)
        logger.info(f"Using SQLite record store: {path}")
        return ConnectionFactory.create_connection("sqlite", db_path=path)

    return ConnectionFactory.create_connection(backend)


_connection: Optional[DatabaseConnection] = None


def get_connection() -> DatabaseConnection:
    """Singleton DatabaseConnection"""
    global _connection
    if _connection is None:
        _connection = build_connection()
    return _connection


# ==============================================================================
# Reset (tests)
# ==============================================================================

def reset_all() -> None:
    """Drop every singleton"""
    global _graph_db, _connection
    if _connection is not None and _connection.is_connected:
        _connection.disconnect()
    _graph_db = None
    _connection = None
