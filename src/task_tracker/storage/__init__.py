"""Storage backends, models and the task store."""

from task_tracker.storage.base import TaskDocument
from task_tracker.storage.errors import (
    NotFoundError,
    StorageError,
    TaskStoreError,
    ValidationError,
)
from task_tracker.storage.json_file import JsonFileDocument
from task_tracker.storage.memory import InMemoryDocument
from task_tracker.storage.models import CreateTaskRequest, Task, UpdateTaskRequest
from task_tracker.storage.store import TaskStore

__all__ = [
    "CreateTaskRequest",
    "InMemoryDocument",
    "JsonFileDocument",
    "NotFoundError",
    "StorageError",
    "Task",
    "TaskDocument",
    "TaskStore",
    "TaskStoreError",
    "UpdateTaskRequest",
    "ValidationError",
]
