"""Unit tests for prioritymatrix.engine.config — MatrixConfig and loading."""

import logging

import pytest

from prioritymatrix.engine.config import (
    CONFIG_FILENAME,
    LoggingConfig,
    MatrixConfig,
    StorageConfig,
    configure_logging,
    get_config,
    load_config,
    resolve_path,
)
from prioritymatrix.engine.errors import ConfigError


@pytest.fixture
def project_root(tmp_path):
    """A directory holding a priority_matrix.yaml."""
    root = tmp_path / "project"
    root.mkdir()
    (root / CONFIG_FILENAME).write_text(
        "storage:\n"
        "  path: data/store.json\n"
        "logging:\n"
        "  level: debug\n"
        "  structured: true\n"
        "sample_tasks_enabled: false\n",
        encoding="utf-8",
    )
    return root


class TestMatrixConfig:
    def test_defaults(self):
        cfg = MatrixConfig()
        assert cfg.storage.path == ".priority_matrix/store.json"
        assert cfg.logging.level == "INFO"
        assert cfg.logging.structured is False
        assert cfg.sample_tasks_enabled is True

    def test_level_normalized(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="level must be one of"):
            LoggingConfig(level="LOUD")

    def test_custom_storage(self):
        cfg = MatrixConfig(storage=StorageConfig(path="/tmp/pm.json"))
        assert cfg.storage.path == "/tmp/pm.json"


class TestLoadConfig:
    def test_load_from_file(self, project_root):
        cfg = load_config(str(project_root / CONFIG_FILENAME))
        assert cfg.storage.path == "data/store.json"
        assert cfg.logging.level == "DEBUG"
        assert cfg.logging.structured is True
        assert cfg.sample_tasks_enabled is False

    def test_missing_file_returns_defaults(self, tmp_path):
        cfg = load_config(str(tmp_path / "nonexistent.yaml"))
        assert cfg == MatrixConfig()

    def test_auto_discovery_walks_up(self, project_root, monkeypatch):
        nested = project_root / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert get_config().sample_tasks_enabled is False
        assert resolve_path("data/store.json") == project_root / "data" / "store.json"

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == MatrixConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("storage: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(path))

    def test_invalid_value(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("logging:\n  level: chatty\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_get_config_caches(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_config() is get_config()


class TestConfigureLogging:
    def test_sets_package_level(self):
        configure_logging(MatrixConfig(logging=LoggingConfig(level="ERROR")))
        assert logging.getLogger("prioritymatrix").level == logging.ERROR
        logging.getLogger("prioritymatrix").setLevel(logging.NOTSET)
