import itertools
import logging
from dataclasses import replace
from typing import List, Optional

from domain.entities import Task
from schemas.task import TaskInput

logger = logging.getLogger(__name__)


class TaskIdGenerator:
    """Monotonic integer ids, unique for the lifetime of one store."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class InMemoryTaskStore:
    """Ordered task collection held in process memory.

    Ordering is insertion order. Updates keep a task's position and id;
    removal keeps the relative order of the remaining tasks. Nothing here
    validates input: callers hand over an already validated ``TaskInput``.
    """

    def __init__(self, id_generator: Optional[TaskIdGenerator] = None):
        self._tasks: List[Task] = []
        self._ids = id_generator or TaskIdGenerator()

    def __len__(self) -> int:
        return len(self._tasks)

    def _index_of(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def add(self, candidate: TaskInput) -> Task:
        task = Task(id=self._ids.next_id(), **candidate.changes())
        self._tasks.append(task)
        logger.debug(f"Stored task {task.id} at position {len(self._tasks) - 1}")
        return task

    def get(self, task_id: int) -> Optional[Task]:
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks[index]

    def list(self) -> List[Task]:
        return list(self._tasks)

    def update(self, task_id: int, candidate: TaskInput) -> Optional[Task]:
        index = self._index_of(task_id)
        if index is None:
            return None
        updated = replace(self._tasks[index], **candidate.changes())
        self._tasks[index] = updated
        return updated

    def remove(self, task_id: int) -> bool:
        index = self._index_of(task_id)
        if index is None:
            return False
        del self._tasks[index]
        return True
