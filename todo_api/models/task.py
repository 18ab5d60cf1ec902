from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text, false
from sqlalchemy.sql import func

from todo_api.database import Base


def utcnow() -> datetime:
    """Current UTC time with microseconds, used for task timestamps."""
    return datetime.now(timezone.utc)


class Task(Base):
    """A to-do item owned by a client session."""

    __tablename__ = "tasks"
    __table_args__ = (Index("idx_tasks_session_id", "session_id"),)

    id = Column(String(255), primary_key=True)
    session_id = Column(String(255), nullable=False)
    title = Column(Text, nullable=False)
    completed = Column(Boolean, default=False, server_default=false(), nullable=False)
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return f"<Task(id='{self.id}', session_id='{self.session_id}', completed={self.completed})>"
