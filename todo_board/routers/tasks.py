"""Task API router."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..models import ErrorResponse, Task, TaskCreate, TaskUpdate
from ..store import TaskNotFoundError, TaskStore, TaskValidationError

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def parse_task_id(task_id: str) -> int:
    """Turn a path segment into a task id, treating junk as an unknown id."""
    try:
        return int(task_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        ) from None


def not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Task not found",
    )


# =============================================================================
# REST API Endpoints (JSON)
# =============================================================================


@router.get("", response_model=list[Task])
def list_tasks(store: TaskStore = Depends(get_store)):
    """Get all tasks in insertion order."""
    return store.list()


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a task by ID."""
    try:
        return store.get(parse_task_id(task_id))
    except TaskNotFoundError:
        raise not_found() from None


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(task_data: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a new task."""
    try:
        return store.create(task_data.text)
    except TaskValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Task text is required",
        ) from None


@router.put("/{task_id}", response_model=Task)
def update_task_endpoint(
    task_id: str, task_data: TaskUpdate, store: TaskStore = Depends(get_store)
):
    """Update a task's text and/or completion flag."""
    try:
        return store.update(
            parse_task_id(task_id),
            text=task_data.text,
            completed=task_data.completed,
        )
    except TaskNotFoundError:
        raise not_found() from None
    except TaskValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from None


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_endpoint(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a task."""
    try:
        store.delete(parse_task_id(task_id))
    except TaskNotFoundError:
        raise not_found() from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
