from typing import Dict


class TaskValidationError(Exception):
    """Raised when a submitted task form fails the task schema.

    ``errors`` maps each offending field name to a message meant to be shown
    next to that field.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


class ModalStateError(Exception):
    """Raised when a form is submitted for a modal that is not open."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Cannot submit {expected} form while modal is {actual}.")
        self.expected = expected
        self.actual = actual
