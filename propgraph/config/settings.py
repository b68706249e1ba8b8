"""
Settings
Identifier prefixes, record store locations and logging options live here,
never hard-coded in the graph or storage modules.
"""
from pathlib import Path
from functools import lru_cache
from pydantic import BaseModel, Field
import yaml

from propgraph.config.constants import IdPrefixes


class GraphSettings(BaseModel):
    """GraphDatabase settings"""
    node_id_prefix: str = Field(default=IdPrefixes.NODE, description="Prefix of auto-assigned node ids")
    edge_id_prefix: str = Field(default=IdPrefixes.EDGE, description="Prefix of auto-assigned edge ids")


class StoreSettings(BaseModel):
    """Record store settings"""
    backend: str = Field(default="json", description="json | sqlite")
    json_path: str = Field(default="data/graph_records.json")
    sqlite_path: str = Field(default="data/graph_records.db")

    node_table: str = Field(default="nodes")
    edge_table: str = Field(default="edges")


class LoggingSettings(BaseModel):
    """Logging settings"""
    level: str = Field(default="INFO")
    format: str = Field(default="%(asctime)s - [%(levelname)s] - %(name)s - %(message)s")


class Settings(BaseModel):
    """All settings (one source of truth)"""
    config_dir: Path = Field(default_factory=lambda: Path(__file__).parent)

    graph: GraphSettings = Field(default_factory=GraphSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    infrastructure_path: str = Field(default="infrastructure.yaml")

    def get_config_path(self, config_name: str) -> Path:
        """Resolve a config file name relative to the config directory"""
        config_map = {
            "infrastructure": self.infrastructure_path,
        }
        return self.config_dir / config_map.get(config_name, config_name)

    def load_yaml_config(self, config_name: str) -> dict:
        """Load a YAML config file"""
        config_path = self.get_config_path(config_name)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


@lru_cache()
def get_settings() -> Settings:
    """Singleton settings instance"""
    return Settings()
