"""
Exception Framework
Structured exceptions for the graph store.

Hierarchy:
- GraphError (base)
  - NodeValidationError (node construction)
  - ReferentialIntegrityError (edge endpoints)
  - DuplicateNodeError (node id collision)
  - StorageError (record stores)
  - ConfigError (configuration)
"""
from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Error severity"""
    LOW = "low"           # caller mistake, log only
    MEDIUM = "medium"     # operation rejected, graph unchanged
    HIGH = "high"         # I/O failure
    CRITICAL = "critical" # cannot start


class ErrorCategory(Enum):
    """Error category"""
    VALIDATION = "validation"
    INTEGRITY = "integrity"
    STORAGE = "storage"
    CONFIG = "config"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Where an error was raised"""
    module: str
    operation: str
    timestamp: datetime = field(default_factory=datetime.now)
    extra: Dict[str, Any] = field(default_factory=dict)


class GraphError(Exception):
    """Base exception for the graph store"""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        retryable: bool = False,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.retryable = retryable
        self.context = context
        self.cause = cause
        self.timestamp = datetime.now()

        self._log()

    def _log(self) -> None:
        log_data = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "retryable": self.retryable,
        }

        if self.context:
            log_data["module"] = self.context.module
            log_data["operation"] = self.context.operation

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical(f"CRITICAL ERROR: {log_data}")
        elif self.severity == ErrorSeverity.HIGH:
            logger.error(f"ERROR: {log_data}")
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning(f"WARNING: {log_data}")
        else:
            logger.info(f"INFO: {log_data}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for logs and the error registry"""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "retryable": self.retryable,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.context:
            result["context"] = {
                "module": self.context.module,
                "operation": self.context.operation,
                "extra": self.context.extra,
            }

        if self.cause:
            result["cause"] = str(self.cause)

        return result


class NodeValidationError(GraphError):
    """A node could not be built from the supplied fields"""

    def __init__(
        self,
        message: str,
        missing_field: Optional[str] = None,
        **kwargs
    ):
        context = ErrorContext(
            module="builders",
            operation="build",
            extra={"missing_field": missing_field} if missing_field else {},
        )
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=kwargs.get("severity", ErrorSeverity.LOW),
            retryable=False,
            context=context,
        )
        self.missing_field = missing_field


class ReferentialIntegrityError(GraphError):
    """An edge endpoint does not reference a registered node"""

    def __init__(
        self,
        message: str,
        endpoint: str,
        node_id: str,
        edge_type: Optional[str] = None,
        **kwargs
    ):
        context = ErrorContext(
            module="core",
            operation="create_edge",
            extra={
                "endpoint": endpoint,
                "node_id": node_id,
                "edge_type": edge_type,
            },
        )
        super().__init__(
            message=message,
            category=ErrorCategory.INTEGRITY,
            severity=kwargs.get("severity", ErrorSeverity.MEDIUM),
            retryable=False,
            context=context,
        )
        self.endpoint = endpoint
        self.node_id = node_id


class DuplicateNodeError(GraphError):
    """A node id is already registered"""

    def __init__(self, message: str, node_id: str, **kwargs):
        context = ErrorContext(
            module="core",
            operation="add_node",
            extra={"node_id": node_id},
        )
        super().__init__(
            message=message,
            category=ErrorCategory.INTEGRITY,
            severity=kwargs.get("severity", ErrorSeverity.MEDIUM),
            retryable=False,
            context=context,
        )
        self.node_id = node_id


class StorageError(GraphError):
    """Record store failure"""

    def __init__(
        self,
        message: str,
        operation: str = "unknown",
        table: Optional[str] = None,
        record_id: Optional[str] = None,
        **kwargs
    ):
        extra = {}
        if table:
            extra["table"] = table
        if record_id:
            extra["record_id"] = record_id
        context = ErrorContext(
            module="storage",
            operation=operation,
            extra=extra,
        )
        super().__init__(
            message=message,
            category=ErrorCategory.STORAGE,
            severity=kwargs.get("severity", ErrorSeverity.HIGH),
            retryable=kwargs.get("retryable", False),
            context=context,
            cause=kwargs.get("cause"),
        )


class ConfigError(GraphError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        context = ErrorContext(
            module="config",
            operation="load",
            extra={"config_key": config_key},
        )
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIG,
            severity=ErrorSeverity.CRITICAL,
            retryable=False,
            context=context,
        )


# ==============================================================================
# Error Registry
# ==============================================================================

class ErrorRegistry:
    """Bounded collection of raised errors for inspection"""

    def __init__(self, max_size: int = 1000):
        self._errors: List[Dict] = []
        self._max_size = max_size

    def record(self, error: GraphError) -> None:
        if len(self._errors) >= self._max_size:
            self._errors.pop(0)  # FIFO
        self._errors.append(error.to_dict())

    def get_recent(self, count: int = 10) -> List[Dict]:
        return self._errors[-count:]

    def get_by_category(self, category: ErrorCategory) -> List[Dict]:
        return [e for e in self._errors if e["category"] == category.value]

    def get_stats(self) -> Dict[str, Any]:
        stats = {
            "total": len(self._errors),
            "by_category": {},
            "by_severity": {},
        }

        for e in self._errors:
            cat = e["category"]
            sev = e["severity"]
            stats["by_category"][cat] = stats["by_category"].get(cat, 0) + 1
            stats["by_severity"][sev] = stats["by_severity"].get(sev, 0) + 1

        return stats

    def clear(self) -> None:
        self._errors.clear()


_error_registry = ErrorRegistry()


def get_error_registry() -> ErrorRegistry:
    return _error_registry
