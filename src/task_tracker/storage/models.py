"""Pydantic models shared by the API and the task store.

Beginner terms used in this file:
- Model: a typed schema class used for validation/serialization.
- field_validator(mode="before"): runs on the raw value before type checks.
- exclude_unset: model_dump option that keeps only fields the client sent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Task(BaseModel):
    """Canonical task record shape stored on disk and returned by the API."""

    # Opaque id assigned once by the store; never reused.
    id: str
    title: str = Field(min_length=1)
    description: str = ""
    completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Any:
        # Hand-edited documents sometimes carry numeric ids.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _description_default(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("completed", mode="before")
    @classmethod
    def _completed_default(cls, value: Any) -> Any:
        return False if value is None else value


class CreateTaskRequest(BaseModel):
    """Request body for POST /api/tasks.

    Title is optional here so that an empty or missing title reaches the store
    and is rejected with 400 rather than a framework-level 422.
    """

    title: str | None = None
    description: str | None = None


class UpdateTaskRequest(BaseModel):
    """Request body for PUT /api/tasks/{task_id}; every field is optional."""

    title: str | None = None
    description: str | None = None
    completed: bool | None = None
