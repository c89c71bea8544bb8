"""Pydantic models for task API."""

from pydantic import BaseModel, ConfigDict


class Task(BaseModel):
    """A single to-do item as stored by the server and held by the client."""

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    completed: bool = False


class TaskCreate(BaseModel):
    """Request model for creating a task.

    ``text`` is optional here so that a missing field reaches the store and
    is rejected with the same 400 as an empty one.
    """

    text: str | None = None


class TaskUpdate(BaseModel):
    """Request model for a partial update."""

    text: str | None = None
    completed: bool | None = None


class ErrorResponse(BaseModel):
    """Body returned with every 4xx response."""

    error: str


class HealthResponse(BaseModel):
    """Response model for the health probe."""

    status: str
    count: int
