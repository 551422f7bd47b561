from __future__ import annotations

from typing import Any

from task_tracker.storage.errors import StorageError


class FailingDocument:
    """Test-only document whose reads and/or writes fail like a broken disk."""

    def __init__(self, *, fail_load: bool = False, fail_save: bool = True) -> None:
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.records: list[dict[str, Any]] = [
            {"id": "1", "title": "Existing", "description": "", "completed": False}
        ]

    def load(self) -> list[dict[str, Any]]:
        if self.fail_load:
            raise StorageError("Failed to read tasks file: permission denied")
        return [dict(record) for record in self.records]

    def save(self, records: list[dict[str, Any]]) -> None:
        if self.fail_save:
            raise StorageError("Failed to save tasks file: disk full")
        self.records = records
