from todo_api.models.task import Task

__all__ = ["Task"]
