"""JSON file backend for the task document.

The whole collection lives in one pretty-printed JSON array. Writes go to a
sibling ``.tmp`` file that is then renamed over the target, so a reader never
observes a half-written document.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from task_tracker.storage.errors import StorageError

logger = logging.getLogger(__name__)


class JsonFileDocument:
    """Task document stored as a JSON array at ``path``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def tmp_path(self) -> Path:
        return self.path.with_name(f"{self.path.name}.tmp")

    def load(self) -> list[dict[str, Any]]:
        """Read the document; a missing file is an empty collection, not an error."""
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            logger.info("task_document event=missing path=%s records=0", self.path)
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise StorageError(f"Invalid JSON in tasks file {self.path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read tasks file {self.path}: {exc}") from exc

        if not isinstance(data, list):
            raise StorageError(f"Tasks file {self.path} must contain a JSON array")
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise StorageError(f"Task {index} in {self.path} is not a JSON object")
        return data

    def save(self, records: list[dict[str, Any]]) -> None:
        """Replace the document with ``records``."""
        payload = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        tmp_path = self.tmp_path
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to save tasks file {self.path}: {exc}") from exc
        logger.debug("task_document event=saved path=%s records=%d", self.path, len(records))
