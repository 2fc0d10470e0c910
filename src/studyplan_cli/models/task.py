"""Task data models."""

from pydantic import BaseModel, Field, field_validator

# Field separator of the on-disk record format. Text fields must not contain it.
RECORD_DELIMITER = "|"


def check_text_field(value: str | None) -> str | None:
    """Reject text that would break a record line on reload."""
    if value is not None and (RECORD_DELIMITER in value or "\n" in value):
        raise ValueError(f"must not contain '{RECORD_DELIMITER}' or line breaks")
    return value


class Task(BaseModel):
    """Task model representing a study task.

    Attributes:
        id: Unique identifier, assigned by the store and never reused
        title: Short description of the work
        subject: Course or subject the task belongs to
        duration_minutes: Estimated effort in minutes
        priority: Priority level (1=highest, larger=lower, no upper bound)
        due_date: Due date as a YYYY-MM-DD string, or empty
        completed: Completion status
    """

    id: int = Field(frozen=True)
    title: str = ""
    subject: str = ""
    duration_minutes: int = Field(default=0, ge=0)
    priority: int = 1
    due_date: str = ""
    completed: bool = False


class TaskCreate(BaseModel):
    """Model for creating a new task.

    New tasks always start incomplete; the id is assigned by the store.

    Attributes:
        title: Short description of the work
        subject: Course or subject
        duration_minutes: Estimated effort in minutes (required)
        priority: Priority level (required, 1=highest)
        due_date: YYYY-MM-DD or empty
    """

    title: str = ""
    subject: str = ""
    duration_minutes: int = Field(ge=0)
    priority: int
    due_date: str = ""

    @field_validator("title", "subject", "due_date")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Text fields are stored unescaped."""
        return check_text_field(v)


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only provided fields will be updated.
    """

    title: str | None = None
    subject: str | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    priority: int | None = None
    due_date: str | None = None
    completed: bool | None = None

    @field_validator("title", "subject", "due_date")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        """Text fields are stored unescaped."""
        return check_text_field(v)
