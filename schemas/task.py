from datetime import date
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from domain.entities import Priority
from domain.exceptions import TaskValidationError

TITLE_REQUIRED = "Task title is required"

# An empty <input type="date"> or the blank <option> posts "", meaning "not set".
BLANK_MEANS_ABSENT = ("due_date", "priority")


class TaskInput(BaseModel):
    """A task form payload that passed validation.

    Only the fields actually submitted are marked as set; ``changes()`` is
    what an edit applies to an existing task.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[Priority] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(TITLE_REQUIRED)
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


def validate_task_form(raw: Mapping[str, Any]) -> TaskInput:
    """Validate a raw form payload, raising TaskValidationError per field."""
    payload = dict(raw)
    for field in BLANK_MEANS_ABSENT:
        value = payload.get(field)
        if isinstance(value, str) and not value.strip():
            payload[field] = None
    try:
        return TaskInput.model_validate(payload)
    except ValidationError as exc:
        raise TaskValidationError(_field_errors(exc)) from exc


def _field_errors(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        if field == "title":
            errors[field] = TITLE_REQUIRED
        else:
            errors.setdefault(field, error["msg"])
    return errors
