"""State behind the tasks page.

The modal is a tagged variant (``Closed``, ``AddOpen``, ``EditOpen``) rather
than a pair of flags, so at most one form can ever be open. ``TaskView`` owns
the store, the pending notifications and the form state for one browser view
and performs every transition synchronously.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from application.notifications import Notifier
from application.use_cases import TaskUseCases
from domain.entities import Task
from domain.exceptions import ModalStateError, TaskValidationError
from infrastructure.task_store import InMemoryTaskStore
from schemas.task import TaskInput, validate_task_form

logger = logging.getLogger(__name__)

FORM_FIELDS = ("title", "description", "due_date", "priority")


@dataclass(frozen=True)
class Closed:
    kind = "closed"


@dataclass(frozen=True)
class AddOpen:
    kind = "add"
    title = "Add Task"


@dataclass(frozen=True)
class EditOpen:
    task_id: int
    kind = "edit"
    title = "Edit Task"


ModalState = Union[Closed, AddOpen, EditOpen]

CLOSED = Closed()


def empty_form() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


def form_values_for(task: Task) -> Dict[str, str]:
    """Current field values of a task, as the edit form shows them."""
    return {
        "title": task.title,
        "description": task.description or "",
        "due_date": task.due_date.isoformat() if task.due_date else "",
        "priority": task.priority.value if task.priority else "",
    }


def retained_values(raw: Mapping[str, Any]) -> Dict[str, str]:
    values = empty_form()
    for field in FORM_FIELDS:
        value = raw.get(field)
        if value is not None:
            values[field] = str(value)
    return values


class TaskView:
    def __init__(self, store: Optional[InMemoryTaskStore] = None, notifier: Optional[Notifier] = None):
        self.store = store if store is not None else InMemoryTaskStore()
        self.notifier = notifier if notifier is not None else Notifier()
        self.tasks = TaskUseCases(self.store, self.notifier)
        self.modal: ModalState = CLOSED
        self.form_values: Dict[str, str] = empty_form()
        self.form_errors: Dict[str, str] = {}

    @property
    def has_errors(self) -> bool:
        return bool(self.form_errors)

    def _transition(self, new_state: ModalState) -> None:
        if not isinstance(self.modal, Closed) and not isinstance(new_state, Closed):
            logger.debug(f"Closing {self.modal.kind} modal to open {new_state.kind} modal")
        logger.debug(f"Modal {self.modal} -> {new_state}")
        self.modal = new_state

    def _close(self) -> None:
        self._transition(CLOSED)
        self.form_values = empty_form()
        self.form_errors = {}

    def _validate(self, raw: Mapping[str, Any]) -> Optional[TaskInput]:
        try:
            return validate_task_form(raw)
        except TaskValidationError as exc:
            logger.debug(f"Form rejected: {exc.errors}")
            self.form_values = retained_values(raw)
            self.form_errors = exc.errors
            return None

    def open_add(self) -> None:
        self._transition(AddOpen())
        self.form_values = empty_form()
        self.form_errors = {}

    def open_edit(self, task_id: int) -> bool:
        task = self.tasks.get_task(task_id)
        if task is None:
            logger.warning(f"Cannot edit task {task_id}: not found")
            return False
        self._transition(EditOpen(task_id))
        self.form_values = form_values_for(task)
        self.form_errors = {}
        return True

    def cancel(self) -> None:
        self._close()

    def submit_add(self, raw: Mapping[str, Any]) -> Optional[Task]:
        if not isinstance(self.modal, AddOpen):
            raise ModalStateError("add", self.modal.kind)
        candidate = self._validate(raw)
        if candidate is None:
            return None
        task = self.tasks.create_task(candidate)
        self._close()
        return task

    def submit_edit(self, task_id: int, raw: Mapping[str, Any]) -> Optional[Task]:
        if self.modal != EditOpen(task_id):
            raise ModalStateError(f"edit({task_id})", self.modal.kind)
        candidate = self._validate(raw)
        if candidate is None:
            return None
        task = self.tasks.update_task(task_id, candidate)
        self._close()
        return task

    def delete(self, task_id: int) -> bool:
        deleted = self.tasks.delete_task(task_id)
        if deleted and self.modal == EditOpen(task_id):
            self._close()
        return deleted

    def render_context(self) -> Dict[str, Any]:
        """Everything the page shows; pending notifications are consumed."""
        notifications: List[str] = self.notifier.drain()
        return {
            "tasks": self.tasks.get_all_tasks(),
            "modal": self.modal,
            "form": dict(self.form_values),
            "errors": dict(self.form_errors),
            "notifications": notifications,
        }
