from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .validation import validate_description, validate_title


# PUBLIC_INTERFACE
@dataclass
class Task:
    """
    A single to-do record.

    Fields:
    - id: Store-assigned identifier; 0 means "not stored yet"
    - title: Short title (1..200 chars)
    - description: Optional detailed description (at most 2000 chars)
    - completed: Boolean completion flag

    Instances are mutable; a stored Task's id stays fixed because the store
    only ever hands out copies.
    """

    id: int
    title: str
    description: Optional[str] = None
    completed: bool = False

    @classmethod
    def create(cls, title: str, description: Optional[str] = None) -> "Task":
        """
        Validate the fields and build an unassigned Task (id=0, completed=False).

        Raises:
            ValidationError if title or description break the length rules.
        """
        validate_title(title)
        validate_description(description)
        return cls(id=0, title=title, description=description, completed=False)


@dataclass(frozen=True)
class Unchanged:
    """Leave the description as it is."""


@dataclass(frozen=True)
class Clear:
    """Remove the description."""


@dataclass(frozen=True)
class SetDescription:
    """Replace the description with `value`."""

    value: str


# Three-state description change accepted by TaskStore.update
DescriptionChange = Union[Unchanged, Clear, SetDescription]

UNCHANGED = Unchanged()
CLEAR = Clear()
