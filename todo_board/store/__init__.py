"""Task store package."""

from .errors import TaskNotFoundError, TaskStoreError, TaskValidationError
from .memory import SEED_TASKS, TaskStore

__all__ = [
    "SEED_TASKS",
    "TaskStore",
    "TaskStoreError",
    "TaskValidationError",
    "TaskNotFoundError",
]
