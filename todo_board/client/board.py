"""Task board state: the ordered view and the operations that change it."""

import logging
from typing import Protocol

from ..models import Task
from . import ordering
from .api import TaskApiError
from .drag import DragGesture

logger = logging.getLogger(__name__)


class TaskApi(Protocol):
    """What the board needs from the store service."""

    async def list_tasks(self) -> list[Task]: ...

    async def create_task(self, text: str) -> Task: ...

    async def update_task(
        self, task_id: int, *, text: str | None = None, completed: bool | None = None
    ) -> Task: ...

    async def delete_task(self, task_id: int) -> None: ...


class TaskBoard:
    """Client-side task board.

    ``tasks`` is the underlying sequence: the server's last known state plus
    local edits and any drag reordering. ``displayed()`` derives the
    pending-first order shown to the user from it.

    Add, toggle and delete touch local state only after the server answers
    successfully, and each response is applied to the sequence as it stands
    when the response arrives, so overlapping requests for the same task end
    with whichever completed last. Failures are logged and otherwise
    ignored. Reordering never talks to the server.
    """

    def __init__(self, api: TaskApi) -> None:
        self.api = api
        self.tasks: list[Task] = []
        self.draft = ""
        self.drag = DragGesture(self.displayed, self.reorder)

    def displayed(self) -> list[Task]:
        return ordering.partition_for_display(self.tasks)

    def find(self, task_id: int) -> Task | None:
        index = ordering.position_of(self.tasks, task_id)
        return None if index is None else self.tasks[index]

    # =========================================================================
    # Server-backed operations
    # =========================================================================

    async def load(self) -> bool:
        """Fetch the collection once; a failure leaves the board as it is."""
        try:
            snapshot = await self.api.list_tasks()
        except TaskApiError as exc:
            logger.error("There was an error fetching the tasks: %s", exc)
            return False
        self.tasks = ordering.merge_snapshot(self.tasks, snapshot)
        logger.debug("Loaded %d tasks", len(self.tasks))
        return True

    async def refresh(self) -> bool:
        """Re-fetch and merge, keeping the local order of known tasks."""
        return await self.load()

    async def add(self, text: str | None = None) -> Task | None:
        """Create a task from ``text`` or from the current draft."""
        if text is not None:
            self.draft = text
        text = self.draft.strip()
        if not text:
            return None
        try:
            task = await self.api.create_task(text)
        except TaskApiError as exc:
            logger.error("Error adding task: %s", exc)
            return None
        self.tasks = ordering.prepend_task(self.tasks, task)
        self.draft = ""
        return task

    async def toggle(self, task_id: int) -> Task | None:
        """Flip the completion flag of a task."""
        current = self.find(task_id)
        if current is None:
            logger.warning("Cannot toggle unknown task %d", task_id)
            return None
        try:
            task = await self.api.update_task(task_id, completed=not current.completed)
        except TaskApiError as exc:
            logger.error("Error updating task %d: %s", task_id, exc)
            return None
        self.tasks = ordering.replace_task(self.tasks, task)
        return task

    async def delete(self, task_id: int) -> bool:
        try:
            await self.api.delete_task(task_id)
        except TaskApiError as exc:
            logger.error("Error deleting task %d: %s", task_id, exc)
            return False
        self.tasks = ordering.remove_task(self.tasks, task_id)
        return True

    # =========================================================================
    # Local-only operations
    # =========================================================================

    def reorder(self, source_id: int, target_id: int) -> bool:
        """Move a pending task onto another task's position, locally."""
        source = self.find(source_id)
        if source is None or source.completed:
            logger.debug("Refusing to move task %s", source_id)
            return False
        moved = ordering.relocate(self.tasks, source_id, target_id)
        if moved is self.tasks:
            return False
        self.tasks = moved
        return True
