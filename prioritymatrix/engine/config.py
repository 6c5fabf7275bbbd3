"""
Priority Matrix Configuration — Load and validate priority_matrix.yaml.

Usage:
    from prioritymatrix.engine.config import load_config, get_config

Example priority_matrix.yaml:

    storage:
      path: .priority_matrix/store.json
    logging:
      level: INFO
      directory: .priority_matrix/logs
      structured: true
    sample_tasks_enabled: true

Scoring thresholds are not configured here; they are user settings held in
the key-value store (see prioritymatrix.records.settings).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError as PydanticValidationError, field_validator

from prioritymatrix.engine.errors import ConfigError

CONFIG_FILENAME = "priority_matrix.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StorageConfig(BaseModel):
    path: str = ".priority_matrix/store.json"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    directory: str = ".priority_matrix/logs"
    structured: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {'/'.join(_LOG_LEVELS)}, got '{v}'")
        return v


class MatrixConfig(BaseModel):
    """Root model for priority_matrix.yaml."""
    storage: StorageConfig = StorageConfig()
    logging: LoggingConfig = LoggingConfig()
    sample_tasks_enabled: bool = True


# ---------------------------------------------------------------------------
# Config Loading Functions
# ---------------------------------------------------------------------------

_config: Optional[MatrixConfig] = None


def _find_project_root() -> Path:
    """Find the project root by looking for priority_matrix.yaml."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / CONFIG_FILENAME).exists():
            return parent
    return current


def load_config(config_path: Optional[str] = None) -> MatrixConfig:
    """
    Load and validate priority_matrix.yaml.

    Args:
        config_path: Explicit path to the YAML file. If None, auto-discovers.

    Returns:
        Validated MatrixConfig instance. A missing file yields defaults.

    Raises:
        ConfigError: the file is not valid YAML or fails validation.
    """
    global _config

    if config_path is None:
        config_path = str(_find_project_root() / CONFIG_FILENAME)

    path = Path(config_path)
    if not path.exists():
        _config = MatrixConfig()
        return _config

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=str(path)) from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}", path=str(path))

    try:
        _config = MatrixConfig(**raw)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}", path=str(path)) from e
    return _config


def get_config() -> MatrixConfig:
    """Get the currently loaded config, loading if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def resolve_path(relative: str) -> Path:
    """Resolve a config-relative path against the project root."""
    p = Path(relative)
    if p.is_absolute():
        return p
    return _find_project_root() / p


def configure_logging(config: Optional[MatrixConfig] = None) -> None:
    """Apply the configured level to the package's stdlib loggers."""
    config = config or get_config()
    logging.getLogger("prioritymatrix").setLevel(config.logging.level)
