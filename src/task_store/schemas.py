from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import CLEAR, UNCHANGED, DescriptionChange, SetDescription, Task
from .repositories import Repository
from .validation import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH, validate_description, validate_title

# Bounds are documented in the JSON schema only; the field validators enforce them
_TITLE_BOUNDS = {"minLength": 1, "maxLength": MAX_TITLE_LENGTH}
_DESCRIPTION_BOUNDS = {"maxLength": MAX_DESCRIPTION_LENGTH}


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for creating a new Task.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
            }
        }
    )

    title: str = Field(..., description="Short title for the task", json_schema_extra=_TITLE_BOUNDS)
    description: Optional[str] = Field(
        default=None, description="Optional detailed description", json_schema_extra=_DESCRIPTION_BOUNDS
    )

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        return validate_title(v)

    @field_validator("description")
    @classmethod
    def check_description(cls, v: Optional[str]) -> Optional[str]:
        return validate_description(v)


# PUBLIC_INTERFACE
class TaskUpdate(BaseModel):
    """
    Schema for updating an existing Task.
    All fields are optional; only provided fields will be updated. An explicit
    null description clears it, an omitted description leaves it alone.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries and supplies",
                "description": None,
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(
        default=None, description="Short title for the task", json_schema_extra=_TITLE_BOUNDS
    )
    description: Optional[str] = Field(
        default=None, description="Optional detailed description", json_schema_extra=_DESCRIPTION_BOUNDS
    )
    completed: Optional[bool] = Field(default=None, description="Completion status flag")

    @field_validator("title")
    @classmethod
    def check_title(cls, v: Optional[str]) -> Optional[str]:
        """
        If title is provided, enforce 1..200 length.
        """
        if v is None:
            return v
        return validate_title(v)

    @field_validator("description")
    @classmethod
    def check_description(cls, v: Optional[str]) -> Optional[str]:
        return validate_description(v)

    def description_change(self) -> DescriptionChange:
        """Translate the payload's description into the store's three-state change."""
        if "description" not in self.model_fields_set:
            return UNCHANGED
        if self.description is None:
            return CLEAR
        return SetDescription(self.description)


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Serializable view of a stored Task.
    """

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 123,
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
                "completed": False,
            }
        },
    )

    id: int = Field(..., ge=1, description="Unique identifier of the task")
    title: str = Field(..., description="Short title for the task")
    description: Optional[str] = Field(default=None, description="Optional detailed description")
    completed: bool = Field(..., description="Completion status flag")

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        """Build the view from a Task returned by the store."""
        return cls.model_validate(task)


# PUBLIC_INTERFACE
def create_from_payload(repo: Repository, payload: TaskCreate) -> Task:
    """Create a Task from a validated create payload."""
    return repo.create(payload.title, payload.description)


# PUBLIC_INTERFACE
def apply_update(repo: Repository, task_id: int, payload: TaskUpdate) -> Task:
    """
    Apply a partial-update payload to the stored Task.

    Raises:
        NotFoundError if the task does not exist.
    """
    return repo.update(
        task_id,
        title=payload.title,
        description=payload.description_change(),
        completed=payload.completed,
    )
