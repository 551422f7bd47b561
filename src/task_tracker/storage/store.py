"""Task store: CRUD over a single shared task document.

Every operation is one read-modify-write cycle over the whole collection:
load all records, change them in memory, save all records. A lock held for
the duration of the cycle serializes writers inside this process.

Beginner terms:
- Document: the full list of task records, persisted as a unit.
- Partial update: only keys the caller sent are applied; others are kept.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from task_tracker.storage.base import TaskDocument
from task_tracker.storage.errors import NotFoundError, StorageError, ValidationError
from task_tracker.storage.json_file import JsonFileDocument
from task_tracker.storage.models import Task

logger = logging.getLogger(__name__)

TITLE_REQUIRED_MESSAGE = "Title is required and must be a non-empty string."


class TaskStore:
    """Thread-safe task store over an injected document backend."""

    def __init__(self, document: TaskDocument) -> None:
        self.document = document
        # Lock guards each whole read-modify-write cycle.
        self._lock = threading.Lock()
        # Highest numeric id issued by this instance; ids only move forward.
        self._last_id = 0

    @classmethod
    def from_path(cls, path: str | Path) -> TaskStore:
        return cls(JsonFileDocument(path))

    def list_tasks(self) -> list[Task]:
        """Return all tasks in stored (insertion) order."""
        with self._lock:
            return self._load()

    def create_task(self, title: Any, description: Any = None) -> Task:
        """Validate, assign a fresh id, append and persist a new task."""
        clean_title = _clean_title(title)
        clean_description = _clean_description(description)
        with self._lock:
            tasks = self._load()
            task = Task(
                id=self._next_id({task.id for task in tasks}),
                title=clean_title,
                description=clean_description,
                completed=False,
            )
            tasks.append(task)
            self._save(tasks)
        logger.info("task_store event=created task_id=%s total=%d", task.id, len(tasks))
        return task

    def update_task(self, task_id: str, fields: Mapping[str, Any]) -> Task:
        """Merge the fields present in ``fields`` into the task and persist.

        An unknown id is reported before the fields are validated.
        """
        with self._lock:
            tasks = self._load()
            index = _index_of(tasks, task_id)
            if index is None:
                raise NotFoundError(task_id)

            changes: dict[str, Any] = {}
            if "title" in fields:
                changes["title"] = _clean_title(fields["title"])
            if "description" in fields:
                changes["description"] = _clean_description(fields["description"])
            if "completed" in fields:
                changes["completed"] = bool(fields["completed"])

            updated = tasks[index].model_copy(update=changes)
            tasks[index] = updated
            self._save(tasks)
        logger.info(
            "task_store event=updated task_id=%s fields=%s",
            task_id,
            ",".join(sorted(changes)) or "-",
        )
        return updated

    def delete_task(self, task_id: str) -> None:
        """Remove the task with ``task_id`` and persist the rest."""
        with self._lock:
            tasks = self._load()
            remaining = [task for task in tasks if task.id != task_id]
            if len(remaining) == len(tasks):
                raise NotFoundError(task_id)
            self._save(remaining)
        logger.info("task_store event=deleted task_id=%s total=%d", task_id, len(remaining))

    def _load(self) -> list[Task]:
        records = self.document.load()
        try:
            tasks = [Task.model_validate(record) for record in records]
        except PydanticValidationError as exc:
            raise StorageError(f"Stored task record is invalid: {exc}") from exc

        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                raise StorageError(f"Stored task id {task.id} is not unique")
            seen.add(task.id)
        return tasks

    def _save(self, tasks: list[Task]) -> None:
        self.document.save([task.model_dump(mode="json") for task in tasks])

    def _next_id(self, existing: set[str]) -> str:
        # Nanosecond timestamp, bumped past anything already issued or stored.
        stored = [int(task_id) for task_id in existing if task_id.isdecimal()]
        candidate = max(time.time_ns(), self._last_id + 1, max(stored, default=0) + 1)
        while str(candidate) in existing:
            candidate += 1
        self._last_id = candidate
        return str(candidate)


def _clean_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(TITLE_REQUIRED_MESSAGE)
    return value.strip()


def _clean_description(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    return ""


def _index_of(tasks: list[Task], task_id: str) -> int | None:
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    return None
