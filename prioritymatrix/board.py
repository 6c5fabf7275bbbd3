"""
Priority Matrix Board — task list service over a key-value store.

Lifecycle of a saved task: validate → normalize → store → log. Every
mutation persists the full task list immediately. Quadrants are computed on
demand from the current settings and never stored.

Usage:
    from prioritymatrix.board import TaskBoard
    from prioritymatrix.storage import JsonFileStore

    board = TaskBoard.open(JsonFileStore("store.json"))
    board.save_task(Task(title="Write report"))
    groups = board.tasks_by_quadrant()
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from prioritymatrix.constants import QUADRANT_ORDER, Quadrant, TaskStatus
from prioritymatrix.engine.config import MatrixConfig, configure_logging, get_config, resolve_path
from prioritymatrix.engine.errors import RecordNotFoundError, ValidationError
from prioritymatrix.engine.logging import (
    get_file_logger,
    init_logging,
    log,
    log_settings_change,
    log_task_operation,
)
from prioritymatrix.records.settings import Settings
from prioritymatrix.records.task import Task
from prioritymatrix.rules.scoring import TaskScore, score_task
from prioritymatrix.rules.validate_task import prepare_task
from prioritymatrix.sample_tasks import build_sample_tasks
from prioritymatrix.storage import (
    JsonFileStore,
    KeyValueStore,
    load_settings,
    load_tasks,
    save_settings,
    save_tasks,
)
from prioritymatrix.utilities.utils import local_now

logger = logging.getLogger("prioritymatrix.board")


class TaskBoard:
    """Holds the task list and settings for one user and keeps them persisted."""

    def __init__(
        self,
        store: KeyValueStore,
        tasks: Optional[List[Task]] = None,
        settings: Optional[Settings] = None,
        samples_enabled: bool = True,
    ):
        self._store = store
        self._tasks: List[Task] = list(tasks or [])
        self._settings: Settings = settings or Settings.defaults()
        self._samples_enabled = samples_enabled

    @classmethod
    def open(cls, store: KeyValueStore, samples_enabled: bool = True) -> "TaskBoard":
        """Load tasks and settings from ``store``. Corrupt content loads as empty/defaults."""
        board = cls(store, load_tasks(store), load_settings(store), samples_enabled)
        logger.debug("Opened board with %d tasks", len(board._tasks))
        return board

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def settings(self) -> Settings:
        return self._settings

    def _index_of(self, task_id: str) -> Optional[int]:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _commit(self, tasks: List[Task]) -> None:
        # Adopt the new list only once it is stored
        save_tasks(self._store, tasks)
        self._tasks = tasks

    # ── Task operations ──

    def get_task(self, task_id: str) -> Task:
        index = self._index_of(task_id)
        if index is None:
            raise RecordNotFoundError(
                f"Task not found: {task_id}", record_id=task_id, operation="get"
            )
        return self._tasks[index]

    def save_task(self, task: Task, now: Optional[datetime] = None) -> Task:
        """
        Create or update a task (matched by id). New tasks go to the front.

        Raises:
            ValidationError: title empty, scores out of range, bad estimate.
        """
        now = now or local_now()
        prepared = prepare_task(task, now)
        index = self._index_of(prepared.id)
        tasks = list(self._tasks)
        if index is None:
            tasks.insert(0, prepared)
            operation = "created"
        else:
            tasks[index] = prepared
            operation = "updated"
        self._commit(tasks)

        score = self.score(prepared, now)
        logger.info("Task %s %s (%s)", prepared.id, operation, score.label)
        log(log_task_operation(operation, prepared.id, quadrant=score.quadrant.value))
        return prepared

    def archive_task(self, task_id: str, now: Optional[datetime] = None) -> Task:
        """Mark a task archived. It stays in storage but leaves every quadrant view."""
        index = self._index_of(task_id)
        if index is None:
            raise RecordNotFoundError(
                f"Task not found: {task_id}", record_id=task_id, operation="archive"
            )
        archived = self._tasks[index].touch(now, status=TaskStatus.ARCHIVED)
        tasks = list(self._tasks)
        tasks[index] = archived
        self._commit(tasks)
        log(log_task_operation("archived", task_id, fields_changed=["status"]))
        return archived

    def delete_task(self, task_id: str) -> None:
        index = self._index_of(task_id)
        if index is None:
            raise RecordNotFoundError(
                f"Task not found: {task_id}", record_id=task_id, operation="delete"
            )
        self._commit(self._tasks[:index] + self._tasks[index + 1:])
        log(log_task_operation("deleted", task_id))

    def add_sample_tasks(self, now: Optional[datetime] = None) -> List[Task]:
        """Prepend the seed tasks whose ids are not already on the board."""
        if not self._samples_enabled:
            logger.info("Sample tasks disabled by configuration")
            return []
        existing = {t.id for t in self._tasks}
        added = [t for t in build_sample_tasks(now) if t.id not in existing]
        if added:
            self._commit(added + self._tasks)
            for task in added:
                log(log_task_operation("seeded", task.id))
        return added

    # ── Views ──

    def active_tasks(self) -> List[Task]:
        return [t for t in self._tasks if t.is_active]

    def search(self, query: str = "") -> List[Task]:
        """Active tasks whose title or notes contain ``query`` (case-insensitive)."""
        needle = query.strip().lower()
        tasks = self.active_tasks()
        if not needle:
            return tasks
        return [
            t for t in tasks
            if needle in t.title.lower() or needle in t.notes.lower()
        ]

    def score(self, task: Task, now: Optional[datetime] = None) -> TaskScore:
        return score_task(task, self._settings, now)

    def tasks_by_quadrant(
        self,
        query: str = "",
        today_focus: bool = False,
        now: Optional[datetime] = None,
    ) -> Dict[Quadrant, List[Task]]:
        """
        Group matching active tasks by quadrant, keys in QUADRANT_ORDER.

        With ``today_focus`` only DO_NOW is populated; the other keys are
        present and empty.
        """
        now = now or local_now()
        groups: Dict[Quadrant, List[Task]] = {q: [] for q in QUADRANT_ORDER}
        for task in self.search(query):
            quadrant = self.score(task, now).quadrant
            if today_focus and quadrant != Quadrant.DO_NOW:
                continue
            groups[quadrant].append(task)
        return groups

    def today_focus(self, now: Optional[datetime] = None) -> List[Task]:
        return self.tasks_by_quadrant(today_focus=True, now=now)[Quadrant.DO_NOW]

    def task_history(self, task_id: str, since: Optional[date] = None) -> List[Dict[str, Any]]:
        """
        Structured log entries recorded for ``task_id``, oldest first.

        Reads the last week unless ``since`` is given. Empty when structured
        logging is off.
        """
        file_logger = get_file_logger()
        if file_logger is None:
            return []
        return file_logger.query(
            "tasks", "execution", start_date=since, filters={"task_id": task_id}
        )

    # ── Settings ──

    def update_settings(
        self,
        impact_threshold: Optional[int] = None,
        urgency_threshold: Optional[int] = None,
    ) -> Settings:
        """
        Change one or both thresholds and persist them.

        Raises:
            ValidationError: a threshold is outside its valid range.
        """
        previous = self._settings
        values = previous.model_dump()
        if impact_threshold is not None:
            values["impact_threshold"] = impact_threshold
        if urgency_threshold is not None:
            values["urgency_threshold"] = urgency_threshold
        try:
            updated = Settings(**values)
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid thresholds",
                validation_errors=[err["msg"] for err in e.errors()],
            ) from e
        self._apply_settings(updated, previous)
        return updated

    def reset_settings(self) -> Settings:
        defaults = Settings.defaults()
        self._apply_settings(defaults, self._settings)
        return defaults

    def _apply_settings(self, updated: Settings, previous: Settings) -> None:
        save_settings(self._store, updated)
        self._settings = updated
        logger.info(
            "Thresholds set to impact=%d urgency=%d",
            updated.impact_threshold, updated.urgency_threshold,
        )
        log(log_settings_change(
            updated.impact_threshold,
            updated.urgency_threshold,
            previous=previous.model_dump(),
        ))


def open_board(config: Optional[MatrixConfig] = None) -> TaskBoard:
    """
    Open the board described by priority_matrix.yaml.

    Applies the configured log level, starts structured logging when enabled
    and opens a JsonFileStore at the configured path.
    """
    config = config or get_config()
    configure_logging(config)
    if config.logging.structured:
        init_logging(str(resolve_path(config.logging.directory)))
    store = JsonFileStore(resolve_path(config.storage.path))
    return TaskBoard.open(store, samples_enabled=config.sample_tasks_enabled)
