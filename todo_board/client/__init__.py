"""Task board client package."""

from .api import TaskApiError, TaskStoreClient
from .board import TaskBoard
from .drag import DragGesture, DragState

__all__ = [
    "TaskApiError",
    "TaskStoreClient",
    "TaskBoard",
    "DragGesture",
    "DragState",
]
