"""Errors raised by the task store."""


class TaskStoreError(Exception):
    """Base class for task store failures."""


class TaskValidationError(TaskStoreError):
    """Task text missing or empty."""


class TaskNotFoundError(TaskStoreError):
    """No task with the given id."""

    def __init__(self, task_id: int | None) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
