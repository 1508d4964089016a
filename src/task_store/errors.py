from __future__ import annotations


# PUBLIC_INTERFACE
class TaskStoreError(Exception):
    """Base class for every error raised by the task store and its collaborators."""


# PUBLIC_INTERFACE
class ValidationError(TaskStoreError, ValueError):
    """
    Raised when user-supplied field content violates a length/emptiness constraint.

    Subclasses ValueError so pydantic field validators can surface it as a
    regular validation failure.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# PUBLIC_INTERFACE
class NotFoundError(TaskStoreError, LookupError):
    """Raised when no task exists for the given identifier."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


# PUBLIC_INTERFACE
class LoginError(TaskStoreError):
    """Raised by the session stub when a login or refresh is rejected."""
