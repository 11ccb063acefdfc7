from typing import List

TASK_ADDED = "Task added successfully"
TASK_UPDATED = "Task updated successfully"
TASK_DELETED = "Task deleted successfully"


class Notifier:
    """Queue of transient messages shown once to the user as toasts."""

    def __init__(self):
        self._pending: List[str] = []

    def notify(self, message: str) -> None:
        self._pending.append(message)

    def drain(self) -> List[str]:
        messages, self._pending = self._pending, []
        return messages
