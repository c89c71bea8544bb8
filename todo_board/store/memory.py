"""In-memory task storage."""

import logging
import threading
from collections.abc import Iterable

from ..models import Task
from .errors import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

SEED_TASKS: tuple[Task, ...] = (
    Task(id=1, text="Learn Docker", completed=False),
    Task(id=2, text="Build a TO-DO app", completed=True),
    Task(id=3, text="Deploy the app", completed=False),
)


class TaskStore:
    """Volatile task collection with a monotonically increasing id counter.

    Tasks are kept in insertion order. Nothing is persisted: ``reset()``
    (or a new instance) brings back the seed set and the counter that
    follows it.
    """

    def __init__(self, seed: Iterable[Task] | None = SEED_TASKS) -> None:
        self._seed: tuple[Task, ...] = tuple(seed or ())
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self._next_id = 1
        self.reset()

    def reset(self) -> None:
        """Restore the seed set and the id counter."""
        with self._lock:
            self._tasks = list(self._seed)
            self._next_id = max((t.id for t in self._seed), default=0) + 1
        logger.debug("Store reset: %d tasks, next id %d", len(self._seed), self._next_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def list(self) -> list[Task]:
        """Get all tasks in insertion order."""
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: int) -> Task:
        """Get a task by ID."""
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def create(self, text: str | None) -> Task:
        """Create a new pending task."""
        if not text:
            raise TaskValidationError("Task text is required")
        with self._lock:
            task = Task(id=self._next_id, text=text, completed=False)
            self._next_id += 1
            self._tasks.append(task)
        logger.info("Created task %d", task.id)
        return task

    def update(
        self, task_id: int, text: str | None = None, completed: bool | None = None
    ) -> Task:
        """Update a task's text and/or completion flag."""
        if text is not None and not text:
            raise TaskValidationError("Task text cannot be empty")
        changes: dict[str, object] = {}
        if text is not None:
            changes["text"] = text
        if completed is not None:
            changes["completed"] = completed

        with self._lock:
            index = self._index_of(task_id)
            task = self._tasks[index].model_copy(update=changes)
            self._tasks[index] = task
        logger.info("Updated task %d: %s", task_id, ", ".join(changes) or "no changes")
        return task

    def delete(self, task_id: int) -> None:
        """Delete a task by ID."""
        with self._lock:
            del self._tasks[self._index_of(task_id)]
        logger.info("Deleted task %d", task_id)
