"""Pure sequence operations behind the board's ordered view.

Every function takes a sequence of tasks and returns a new list; none of
them mutate their input. The board keeps one underlying sequence and derives
the displayed order from it with ``partition_for_display``.
"""

from collections.abc import Sequence

from ..models import Task


def position_of(tasks: Sequence[Task], task_id: int) -> int | None:
    """Index of ``task_id`` in ``tasks``, or None."""
    for index, task in enumerate(tasks):
        if task.id == task_id:
            return index
    return None


def merge_snapshot(local: Sequence[Task], snapshot: Sequence[Task]) -> list[Task]:
    """Fold a fresh server snapshot into the local sequence.

    Tasks known to both keep their local position and take the server's
    values. Tasks the server no longer has are dropped. Tasks new to the
    client are appended in snapshot order, so merging into an empty
    sequence yields the snapshot order unchanged.
    """
    fresh = {task.id: task for task in snapshot}
    merged = [fresh.pop(task.id) for task in local if task.id in fresh]
    merged.extend(task for task in snapshot if task.id in fresh)
    return merged


def partition_for_display(tasks: Sequence[Task]) -> list[Task]:
    """Stable partition: pending tasks first, then completed ones.

    Relative order inside each group is exactly the input order.
    """
    pending = [task for task in tasks if not task.completed]
    completed = [task for task in tasks if task.completed]
    return pending + completed


def relocate(tasks: list[Task], source_id: int, target_id: int) -> list[Task]:
    """Move the source task to the target's index.

    The source is removed and reinserted at the index the target occupied,
    shifting everything in between by one. Equal or unknown ids return
    ``tasks`` itself, untouched.
    """
    if source_id == target_id:
        return tasks
    old_index = position_of(tasks, source_id)
    new_index = position_of(tasks, target_id)
    if old_index is None or new_index is None:
        return tasks

    moved = list(tasks)
    moved.insert(new_index, moved.pop(old_index))
    return moved


def replace_task(tasks: Sequence[Task], updated: Task) -> list[Task]:
    """Swap in ``updated`` where a task with the same id sits."""
    return [updated if task.id == updated.id else task for task in tasks]


def remove_task(tasks: Sequence[Task], task_id: int) -> list[Task]:
    return [task for task in tasks if task.id != task_id]


def prepend_task(tasks: Sequence[Task], task: Task) -> list[Task]:
    return [task, *tasks]
