"""Priority Matrix Engine — configuration, errors, structured logging."""

from prioritymatrix.engine.config import MatrixConfig, get_config, load_config  # noqa: F401
from prioritymatrix.engine.errors import (  # noqa: F401
    ConfigError,
    PriorityMatrixError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "MatrixConfig",
    "get_config",
    "load_config",
    "PriorityMatrixError",
    "ValidationError",
    "RecordNotFoundError",
    "StorageError",
    "ConfigError",
]
