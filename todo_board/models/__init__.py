"""Models package."""

from .task import ErrorResponse, HealthResponse, Task, TaskCreate, TaskUpdate

__all__ = [
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "ErrorResponse",
    "HealthResponse",
]
