"""Drag gesture state machine.

A gesture goes ``idle -> dragging(source) -> resolved | cancelled`` and then
back to idle. Input handling (pointer or keyboard) only feeds events into
``DragGesture``; the actual move is delegated to the ``on_reorder`` callback
once a gesture resolves onto a different pending task.
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from ..models import Task

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    """Drag gesture states."""

    IDLE = "idle"
    DRAGGING = "dragging"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class DragGesture:
    """One drag gesture at a time over the board's displayed sequence.

    ``displayed`` returns the current displayed (partitioned) sequence. Only
    its pending block, the contiguous run of not-completed tasks at the top,
    takes part in dragging: completed tasks are neither sources nor targets.
    """

    def __init__(
        self,
        displayed: Callable[[], Sequence[Task]],
        on_reorder: Callable[[int, int], None],
    ) -> None:
        self._displayed = displayed
        self._on_reorder = on_reorder
        self.state = DragState.IDLE
        self.source_id: int | None = None
        self.over_id: int | None = None
        self.last_outcome: DragState | None = None

    @property
    def active(self) -> bool:
        return self.state is DragState.DRAGGING

    def pending_ids(self) -> list[int]:
        return [task.id for task in self._displayed() if not task.completed]

    def begin(self, task_id: int) -> bool:
        """Pick up a task. Completed or unknown tasks cannot be dragged."""
        if self.active:
            self.cancel()
        if task_id not in self.pending_ids():
            logger.debug("Task %s is not draggable", task_id)
            return False
        self.state = DragState.DRAGGING
        self.source_id = task_id
        self.over_id = task_id
        return True

    def hover(self, target_id: int | None) -> bool:
        """Pointer moved over ``target_id``; None means over nothing droppable."""
        if not self.active:
            return False
        if target_id is not None and target_id not in self.pending_ids():
            target_id = None
        self.over_id = target_id
        return target_id is not None

    def step(self, delta: int) -> int | None:
        """Keyboard movement: shift the drop target by ``delta`` rows."""
        if not self.active:
            return None
        pending = self.pending_ids()
        anchor = self.over_id if self.over_id in pending else self.source_id
        if anchor not in pending:
            return None
        index = min(max(pending.index(anchor) + delta, 0), len(pending) - 1)
        self.over_id = pending[index]
        return self.over_id

    def drop(self, target_id: int | None = None) -> DragState:
        """Release the task over ``target_id`` or the hovered target."""
        if not self.active:
            return DragState.IDLE
        if target_id is None:
            target_id = self.over_id
        source_id = self.source_id

        if target_id is None or target_id == source_id or target_id not in self.pending_ids():
            return self._finish(DragState.CANCELLED)

        self._on_reorder(source_id, target_id)
        return self._finish(DragState.RESOLVED)

    def cancel(self) -> DragState:
        if not self.active:
            return DragState.IDLE
        return self._finish(DragState.CANCELLED)

    def _finish(self, outcome: DragState) -> DragState:
        logger.debug("Drag of %s %s over %s", self.source_id, outcome.value, self.over_id)
        self.state = DragState.IDLE
        self.source_id = None
        self.over_id = None
        self.last_outcome = outcome
        return outcome
