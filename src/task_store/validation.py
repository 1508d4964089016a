from __future__ import annotations

from typing import Optional

from .errors import ValidationError

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000


# PUBLIC_INTERFACE
def validate_title(title: str) -> str:
    """
    Enforce 1..200 characters on a title and return it unchanged.

    Raises:
        ValidationError if the title is empty or too long.
    """
    if not (1 <= len(title) <= MAX_TITLE_LENGTH):
        raise ValidationError(f"Title must be between 1 and {MAX_TITLE_LENGTH} characters")
    return title


# PUBLIC_INTERFACE
def validate_description(description: Optional[str]) -> Optional[str]:
    """
    Enforce the 2000 character limit on a description, if one is given.

    Raises:
        ValidationError if the description is too long.
    """
    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters")
    return description
