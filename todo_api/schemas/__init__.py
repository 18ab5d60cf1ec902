from todo_api.schemas.task import TaskCreate, TaskResponse, TaskUpdate

__all__ = ["TaskCreate", "TaskUpdate", "TaskResponse"]
