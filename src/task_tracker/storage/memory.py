"""In-memory document backend for tests only."""

from __future__ import annotations

import copy
from typing import Any


class InMemoryDocument:
    """Keeps the task collection in a list; counts saves so tests can assert on writes."""

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self._records: list[dict[str, Any]] = copy.deepcopy(records or [])
        self.save_count = 0

    def load(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._records)

    def save(self, records: list[dict[str, Any]]) -> None:
        self._records = copy.deepcopy(records)
        self.save_count += 1
