"""Storage interfaces for the task document."""

from __future__ import annotations

from typing import Any, Protocol


class TaskDocument(Protocol):
    """Whole-document persistence: every save replaces the full collection."""

    def load(self) -> list[dict[str, Any]]: ...

    def save(self, records: list[dict[str, Any]]) -> None: ...
