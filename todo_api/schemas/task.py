from datetime import datetime

from pydantic import BaseModel, Field, StrictStr


class TaskBase(BaseModel):
    """Base task schema."""
    title: StrictStr = Field(min_length=1)


class TaskCreate(TaskBase):
    """Task creation schema."""
    pass


class TaskUpdate(TaskBase):
    """Task title update schema."""
    pass


class TaskResponse(BaseModel):
    """Task response schema."""
    id: str
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
