"""FastAPI application wiring for the task tracker.

Beginner terms used in this file:
- FastAPI app: the main web application object.
- Route/path operation: a function exposed over HTTP (for example, GET /health).
- response_model: Pydantic model used to validate/shape API responses.
- app.state: a place to store shared runtime objects (here, the task store).
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from task_tracker.api.ui import render_homepage
from task_tracker.config.settings import Settings, get_settings
from task_tracker.storage.errors import NotFoundError, StorageError, ValidationError
from task_tracker.storage.models import CreateTaskRequest, Task, UpdateTaskRequest
from task_tracker.storage.store import TaskStore

logger = logging.getLogger(__name__)


def create_app(
    *,
    store: TaskStore | None = None,
    settings_override: Settings | None = None,
) -> FastAPI:
    """Application factory.

    Tests pass an explicit ``store`` (usually over an in-memory document);
    otherwise the store is built over the configured JSON file.
    """
    settings = settings_override or get_settings()

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Shared objects live in app.state so route handlers can reuse them.
    app.state.settings = settings
    app.state.store = store if store is not None else TaskStore.from_path(settings.tasks_file)

    def _get_task_store(request: Request) -> TaskStore:
        return request.app.state.store

    @app.get("/", response_class=HTMLResponse)
    def home() -> str:
        return render_homepage(app_name=settings.app_name)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    @app.get("/api/tasks", response_model=list[Task])
    def list_tasks(request: Request) -> list[Task]:
        try:
            return _get_task_store(request).list_tasks()
        except StorageError as exc:
            logger.exception("task_api event=list_failed")
            raise HTTPException(status_code=500, detail="Error fetching tasks") from exc

    @app.post("/api/tasks", response_model=Task, status_code=201)
    def create_task(payload: CreateTaskRequest, request: Request) -> Task:
        try:
            return _get_task_store(request).create_task(payload.title, payload.description)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except StorageError as exc:
            logger.exception("task_api event=create_failed")
            raise HTTPException(status_code=500, detail="Error adding task") from exc

    @app.put("/api/tasks/{task_id}", response_model=Task)
    def update_task(task_id: str, payload: UpdateTaskRequest, request: Request) -> Task:
        # Only fields present in the request body are merged.
        fields = payload.model_dump(exclude_unset=True)
        try:
            return _get_task_store(request).update_task(task_id, fields)
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail="Task not found") from exc
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except StorageError as exc:
            logger.exception("task_api event=update_failed task_id=%s", task_id)
            raise HTTPException(status_code=500, detail="Error updating task") from exc

    @app.delete("/api/tasks/{task_id}", status_code=204, response_class=Response)
    def delete_task(task_id: str, request: Request) -> Response:
        try:
            _get_task_store(request).delete_task(task_id)
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail="Task not found") from exc
        except StorageError as exc:
            logger.exception("task_api event=delete_failed task_id=%s", task_id)
            raise HTTPException(status_code=500, detail="Error deleting task") from exc
        return Response(status_code=204)

    return app


def run() -> None:
    """Console entry point: configure logging and serve the app with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info(
        "server event=start url=http://%s:%d tasks_file=%s",
        settings.host,
        settings.port,
        settings.tasks_file,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


# Module-level app for `uvicorn task_tracker.api.main:app`.
app = create_app()
