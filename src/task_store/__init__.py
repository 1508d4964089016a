"""
In-memory task store package.

Exposes the store, the Task entity, the description-change variants used by
TaskStore.update and the error types at package level.
"""

from .errors import LoginError, NotFoundError, TaskStoreError, ValidationError
from .models import CLEAR, UNCHANGED, Clear, DescriptionChange, SetDescription, Task, Unchanged
from .repositories import Repository, TaskStore

__all__ = [
    "CLEAR",
    "UNCHANGED",
    "Clear",
    "DescriptionChange",
    "LoginError",
    "NotFoundError",
    "Repository",
    "SetDescription",
    "Task",
    "TaskStore",
    "TaskStoreError",
    "Unchanged",
    "ValidationError",
]
