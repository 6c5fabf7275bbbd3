"""Unit tests for prioritymatrix.engine.logging — LogEntry, FileLogger, builders."""

import json
from datetime import date, timedelta

import pytest

from prioritymatrix.constants import SETTINGS_KEY, TASKS_KEY
from prioritymatrix.engine.logging import (
    OBJECT_TYPE_CATEGORIES,
    FileLogger,
    LogEntry,
    init_logging,
    log,
    log_settings_change,
    log_storage_fallback,
    log_task_operation,
    shutdown_logging,
)
from prioritymatrix.storage import MemoryStore, load_settings, load_tasks


class TestLogEntry:
    def test_to_json(self):
        entry = LogEntry("tasks", "execution", {"task_id": "t1"})
        assert json.loads(entry.to_json()) == {"task_id": "t1"}


class TestBuilders:
    def test_task_operation(self):
        entry = log_task_operation("created", "t1", quadrant="DO_NOW")
        assert (entry.object_type, entry.category) == ("tasks", "execution")
        assert entry.data["event"] == "task_created"
        assert entry.data["quadrant"] == "DO_NOW"
        assert "fields_changed" not in entry.data

    def test_none_values_omitted(self):
        entry = log_task_operation("deleted", "t1")
        assert "quadrant" not in entry.data

    def test_settings_change(self):
        entry = log_settings_change(8, 4, previous={"impact_threshold": 7, "urgency_threshold": 5})
        assert entry.object_type == "settings"
        assert entry.data["impact_threshold"] == 8
        assert entry.data["previous"]["urgency_threshold"] == 5

    def test_storage_fallback(self):
        entry = log_storage_fallback(TASKS_KEY, "invalid JSON")
        assert (entry.object_type, entry.category) == ("storage", "errors")
        assert entry.data["level"] == "WARNING"


class TestFileLogger:
    def test_creates_directories(self, tmp_path):
        FileLogger(str(tmp_path))
        for obj_type, categories in OBJECT_TYPE_CATEGORIES.items():
            for cat in categories:
                assert (tmp_path / obj_type / cat).is_dir()

    def test_write_and_query(self, tmp_path):
        fl = FileLogger(str(tmp_path))
        fl.write(log_task_operation("created", "t1"))
        fl.write(log_task_operation("archived", "t2"))
        entries = fl.query("tasks", "execution")
        assert [e["task_id"] for e in entries] == ["t1", "t2"]

    def test_daily_file_name(self, tmp_path):
        fl = FileLogger(str(tmp_path))
        fl.write(log_task_operation("created", "t1"))
        assert (tmp_path / "tasks" / "execution" / f"{date.today().isoformat()}.jsonl").exists()

    def test_filters(self, tmp_path):
        fl = FileLogger(str(tmp_path))
        fl.write(log_task_operation("created", "t1"))
        fl.write(log_task_operation("deleted", "t1"))
        fl.write(log_settings_change(7, 5))
        assert len(fl.query("tasks", "execution", filters={"operation": "deleted"})) == 1
        assert len(fl.query("settings", "execution")) == 1

    def test_query_limit_and_range(self, tmp_path):
        fl = FileLogger(str(tmp_path))
        for i in range(5):
            fl.write(log_task_operation("created", f"t{i}"))
        assert len(fl.query("tasks", "execution", limit=2)) == 2
        yesterday = date.today() - timedelta(days=1)
        assert fl.query("tasks", "execution", start_date=yesterday, end_date=yesterday) == []

    def test_corrupt_lines_skipped(self, tmp_path):
        fl = FileLogger(str(tmp_path))
        fl.write(log_task_operation("created", "t1"))
        path = tmp_path / "tasks" / "execution" / f"{date.today().isoformat()}.jsonl"
        with open(path, "a", encoding="utf-8") as f:
            f.write("not json\n\n")
        assert [e["task_id"] for e in fl.query("tasks", "execution")] == ["t1"]

    def test_unknown_target_rejected(self, tmp_path):
        fl = FileLogger(str(tmp_path))
        with pytest.raises(ValueError):
            fl.write(LogEntry("tasks", "security", {}))

    def test_query_missing_type(self, tmp_path):
        assert FileLogger(str(tmp_path)).query("nothing", "here") == []


class TestGlobalLogger:
    def test_noop_until_initialized(self):
        assert log(log_task_operation("created", "dropped")) is False

    def test_init_and_shutdown(self, tmp_path):
        init_logging(str(tmp_path))
        assert log(log_task_operation("created", "kept")) is True
        shutdown_logging()
        assert log(log_task_operation("created", "after")) is False

    def test_storage_fallbacks_logged(self, tmp_path):
        fl = init_logging(str(tmp_path))
        load_tasks(MemoryStore({TASKS_KEY: "[oops"}))
        load_settings(MemoryStore({SETTINGS_KEY: "5"}))
        keys = [e["key"] for e in fl.query("storage", "errors")]
        assert keys == [TASKS_KEY, SETTINGS_KEY]
