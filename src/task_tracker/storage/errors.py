"""Errors raised by the task store and its document backends."""

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for task store failures."""


class ValidationError(TaskStoreError):
    """Input was malformed or a required value was missing."""


class NotFoundError(TaskStoreError):
    """An operation referenced a task id that is not stored."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id} does not exist")
        self.task_id = task_id


class StorageError(TaskStoreError):
    """Reading or writing the task document failed."""
