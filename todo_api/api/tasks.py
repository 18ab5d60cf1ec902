import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from todo_api.core.deps import get_session_id
from todo_api.database import get_db
from todo_api.models.task import Task
from todo_api.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from todo_api.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


def _server_error(action: str, exc: Exception) -> HTTPException:
    """Log a store failure and build the generic 500 shown to the client."""
    logger.error(f"Failed to {action}: {exc}", exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


def _get_existing_task(db: Session, task_id: str, session_id: str, action: str) -> Task:
    """Look up a task in the session, raising 404 when it is absent."""
    try:
        task = TaskService.get_task(db, task_id, session_id)
    except Exception as e:
        raise _server_error(action, e) from e

    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    return task


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db)
):
    """List all tasks for the current session."""
    try:
        return TaskService.list_tasks(db, session_id)
    except Exception as e:
        raise _server_error("fetch tasks", e) from e


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_create: TaskCreate,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db)
):
    """Create a new task."""
    try:
        return TaskService.create_task(db, str(uuid.uuid4()), session_id, task_create.title)
    except Exception as e:
        raise _server_error("create task", e) from e


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db)
):
    """Get a task by ID."""
    return _get_existing_task(db, task_id, session_id, "fetch task")


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db)
):
    """Update a task's title."""
    _get_existing_task(db, task_id, session_id, "update task")

    try:
        task = TaskService.update_task(db, task_id, session_id, task_update.title)
    except Exception as e:
        raise _server_error("update task", e) from e

    # Deleted between the existence check and the update
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    return task


@router.patch("/{task_id}/toggle", response_model=TaskResponse)
def toggle_task(
    task_id: str,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db)
):
    """Toggle a task's completion status."""
    _get_existing_task(db, task_id, session_id, "toggle task")

    try:
        task = TaskService.toggle_task(db, task_id, session_id)
    except Exception as e:
        raise _server_error("toggle task", e) from e

    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: str,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db)
):
    """Delete a task."""
    _get_existing_task(db, task_id, session_id, "delete task")

    try:
        TaskService.delete_task(db, task_id, session_id)
    except Exception as e:
        raise _server_error("delete task", e) from e
