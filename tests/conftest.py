from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.api.main import create_app
from task_tracker.config.settings import Settings
from task_tracker.storage.memory import InMemoryDocument
from task_tracker.storage.store import TaskStore


@pytest.fixture
def document() -> InMemoryDocument:
    return InMemoryDocument()


@pytest.fixture
def store(document: InMemoryDocument) -> TaskStore:
    return TaskStore(document)


@pytest.fixture
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "tasks.json"


@pytest.fixture
def client(store: TaskStore) -> Iterator[TestClient]:
    app = create_app(store=store, settings_override=Settings(app_name="task-tracker-test"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def file_client(tasks_path: Path) -> Iterator[TestClient]:
    app = create_app(settings_override=Settings(tasks_file=tasks_path))
    with TestClient(app) as test_client:
        yield test_client
