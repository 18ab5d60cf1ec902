import logging

from sqlalchemy import not_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from todo_api.exceptions import DuplicateTaskError, TaskStoreError
from todo_api.models.task import Task, utcnow

logger = logging.getLogger(__name__)


def _store_error(db: Session, action: str, exc: SQLAlchemyError) -> TaskStoreError:
    """Roll back the session and wrap a database error."""
    db.rollback()
    return TaskStoreError(f"Failed to {action}: {exc}")


class TaskService:
    """Session-scoped task persistence.

    Every lookup and mutation filters on both the task id and the owning
    session id, so a task is never visible outside its session.
    """

    @staticmethod
    def _scoped(db: Session, task_id: str, session_id: str):
        return db.query(Task).filter(Task.id == task_id, Task.session_id == session_id)

    @staticmethod
    def list_tasks(db: Session, session_id: str) -> list[Task]:
        """List tasks for a session, newest first."""
        try:
            return db.query(Task).filter(
                Task.session_id == session_id
            ).order_by(Task.created_at.desc()).all()
        except SQLAlchemyError as e:
            raise _store_error(db, "list tasks", e) from e

    @staticmethod
    def create_task(db: Session, task_id: str, session_id: str, title: str) -> Task:
        """Insert a new, not yet completed task."""
        now = utcnow()
        db_task = Task(
            id=task_id,
            session_id=session_id,
            title=title,
            completed=False,
            created_at=now,
            updated_at=now,
        )
        db.add(db_task)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DuplicateTaskError(f"Task id already exists: {task_id}") from e
        except SQLAlchemyError as e:
            raise _store_error(db, "create task", e) from e
        db.refresh(db_task)
        logger.info(f"Created task {task_id} for session {session_id}")
        return db_task

    @staticmethod
    def get_task(db: Session, task_id: str, session_id: str) -> Task | None:
        """Get a task by id within a session."""
        try:
            return TaskService._scoped(db, task_id, session_id).first()
        except SQLAlchemyError as e:
            raise _store_error(db, "get task", e) from e

    @staticmethod
    def update_task(db: Session, task_id: str, session_id: str, title: str) -> Task | None:
        """Set a task's title. Returns None when no row matched."""
        try:
            matched = TaskService._scoped(db, task_id, session_id).update(
                {Task.title: title, Task.updated_at: utcnow()},
                synchronize_session=False,
            )
            db.commit()
        except SQLAlchemyError as e:
            raise _store_error(db, "update task", e) from e
        if not matched:
            return None
        return TaskService.get_task(db, task_id, session_id)

    @staticmethod
    def toggle_task(db: Session, task_id: str, session_id: str) -> Task | None:
        """Negate a task's completed flag. Returns None when no row matched."""
        try:
            matched = TaskService._scoped(db, task_id, session_id).update(
                {Task.completed: not_(Task.completed), Task.updated_at: utcnow()},
                synchronize_session=False,
            )
            db.commit()
        except SQLAlchemyError as e:
            raise _store_error(db, "toggle task", e) from e
        if not matched:
            return None
        return TaskService.get_task(db, task_id, session_id)

    @staticmethod
    def delete_task(db: Session, task_id: str, session_id: str) -> None:
        """Delete a task. Deleting a missing task is not an error."""
        try:
            deleted = TaskService._scoped(db, task_id, session_id).delete(
                synchronize_session=False
            )
            db.commit()
        except SQLAlchemyError as e:
            raise _store_error(db, "delete task", e) from e
        if deleted:
            logger.info(f"Deleted task {task_id} for session {session_id}")
