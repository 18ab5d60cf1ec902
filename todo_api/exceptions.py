class TaskStoreError(Exception):
    """Raised when a task storage operation fails."""


class DuplicateTaskError(TaskStoreError):
    """Raised when a task id collides with an existing row."""
