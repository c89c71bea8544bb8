from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from todo_board.client.api import TaskApiError
from todo_board.models import Task
from todo_board.store import TaskNotFoundError, TaskStore, TaskValidationError


@dataclass
class FakeTaskApi:
    """
    In-process stand-in for TaskStoreClient.

    - Delegates to a real TaskStore so ids and 404s behave like the service
    - Records every call for assertions
    - ``fail`` makes every call raise TaskApiError
    - ``gates`` holds update responses until the test releases them
    """

    store: TaskStore = field(default_factory=TaskStore)
    fail: bool = False
    calls: list[tuple] = field(default_factory=list)
    gates: dict[int, list[asyncio.Event]] = field(default_factory=dict)

    def _check(self) -> None:
        if self.fail:
            raise TaskApiError("connection refused")

    async def list_tasks(self) -> list[Task]:
        self.calls.append(("list",))
        self._check()
        return self.store.list()

    async def create_task(self, text: str) -> Task:
        self.calls.append(("create", text))
        self._check()
        try:
            return self.store.create(text)
        except TaskValidationError as exc:
            raise TaskApiError(str(exc), status_code=400) from exc

    async def update_task(
        self, task_id: int, *, text: str | None = None, completed: bool | None = None
    ) -> Task:
        self.calls.append(("update", task_id, completed))
        self._check()
        try:
            task = self.store.update(task_id, text=text, completed=completed)
        except TaskNotFoundError as exc:
            raise TaskApiError(str(exc), status_code=404) from exc
        pending = self.gates.get(task_id)
        if pending:
            await pending.pop(0).wait()
        return task

    async def delete_task(self, task_id: int) -> None:
        self.calls.append(("delete", task_id))
        self._check()
        try:
            self.store.delete(task_id)
        except TaskNotFoundError as exc:
            raise TaskApiError(str(exc), status_code=404) from exc

    def gate(self, task_id: int) -> asyncio.Event:
        event = asyncio.Event()
        self.gates.setdefault(task_id, []).append(event)
        return event
