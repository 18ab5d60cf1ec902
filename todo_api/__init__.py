"""Session-scoped to-do list REST backend."""

__version__ = "1.0.0"
