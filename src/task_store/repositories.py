from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Optional

from .errors import NotFoundError, ValidationError
from .models import Clear, DescriptionChange, SetDescription, Task, UNCHANGED, Unchanged
from .validation import validate_description, validate_title

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for task storage backends."""

    @abstractmethod
    def create(self, title: str, description: Optional[str] = None) -> Task:
        """Validate, store and return a new Task."""

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Return a Task by id, or raise NotFoundError."""

    @abstractmethod
    def list(self, completed: Optional[bool] = None) -> List[Task]:
        """Return stored Tasks in insertion order, optionally filtered by completion flag."""

    @abstractmethod
    def update(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: DescriptionChange = UNCHANGED,
        completed: Optional[bool] = None,
    ) -> Task:
        """Update the provided fields of an existing Task and return it."""

    @abstractmethod
    def delete(self, task_id: int) -> Task:
        """Remove a Task by id and return it, or raise NotFoundError."""


# PUBLIC_INTERFACE
class TaskStore(Repository):
    """
    In-memory task repository.

    Tasks are kept in insertion order and ids come from a counter that starts
    at 1 and never goes back, so deleted ids are not reused. Every method
    returns copies; callers cannot reach the stored records.

    Not thread-safe: callers sharing a store across threads must serialize
    access themselves.
    """

    def __init__(self) -> None:
        self._items: List[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._items)

    @property
    def next_id(self) -> int:
        """Identifier the next successful create will assign."""
        return self._next_id

    def _find(self, task_id: int) -> Task:
        for item in self._items:
            if item.id == task_id:
                return item
        raise NotFoundError(task_id)

    def create(self, title: str, description: Optional[str] = None) -> Task:
        try:
            task = Task.create(title, description)
        except ValidationError as exc:
            logger.info("Rejected task create: %s", exc.message)
            raise
        task.id = self._next_id
        self._next_id += 1
        self._items.append(task)
        logger.debug("Created task id=%s", task.id)
        return replace(task)

    def get(self, task_id: int) -> Task:
        return replace(self._find(task_id))

    def list(self, completed: Optional[bool] = None) -> List[Task]:
        return [replace(t) for t in self._items if completed is None or t.completed == completed]

    def update(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: DescriptionChange = UNCHANGED,
        completed: Optional[bool] = None,
    ) -> Task:
        existing = self._find(task_id)
        if not isinstance(description, (Unchanged, Clear, SetDescription)):
            raise TypeError(f"Unsupported description change: {description!r}")

        # Validate every provided field before touching the stored record
        try:
            if title is not None:
                validate_title(title)
            if isinstance(description, SetDescription):
                validate_description(description.value)
        except ValidationError as exc:
            logger.info("Rejected update of task id=%s: %s", task_id, exc.message)
            raise

        if title is not None:
            existing.title = title
        if isinstance(description, SetDescription):
            existing.description = description.value
        elif isinstance(description, Clear):
            existing.description = None
        if completed is not None:
            existing.completed = completed

        logger.debug("Updated task id=%s", task_id)
        return replace(existing)

    def delete(self, task_id: int) -> Task:
        for pos, item in enumerate(self._items):
            if item.id == task_id:
                logger.debug("Deleted task id=%s", task_id)
                return self._items.pop(pos)
        raise NotFoundError(task_id)
