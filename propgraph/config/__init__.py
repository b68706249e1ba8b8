# Configuration Package
from propgraph.config.settings import (
    Settings,
    GraphSettings,
    StoreSettings,
    LoggingSettings,
    get_settings,
)
from propgraph.config.constants import IdPrefixes, LogMessages

__all__ = [
    "Settings",
    "GraphSettings",
    "StoreSettings",
    "LoggingSettings",
    "get_settings",
    "IdPrefixes",
    "LogMessages",
]
