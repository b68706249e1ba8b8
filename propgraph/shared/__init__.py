# shared package
from .error_framework import (
    GraphError,
    NodeValidationError,
    ReferentialIntegrityError,
    DuplicateNodeError,
    StorageError,
    ConfigError,
    ErrorCategory,
    ErrorSeverity,
    ErrorContext,
    ErrorRegistry,
    get_error_registry,
)
from .formatting import compact_json, unique_in_order

__all__ = [
    # Exceptions
    "GraphError",
    "NodeValidationError",
    "ReferentialIntegrityError",
    "DuplicateNodeError",
    "StorageError",
    "ConfigError",
    "ErrorCategory",
    "ErrorSeverity",
    "ErrorContext",
    "ErrorRegistry",
    "get_error_registry",
    # Formatting
    "compact_json",
    "unique_in_order",
]
