import logging
from typing import List, Optional

from application.notifications import TASK_ADDED, TASK_DELETED, TASK_UPDATED, Notifier
from domain.entities import Task
from infrastructure.task_store import InMemoryTaskStore
from schemas.task import TaskInput

logger = logging.getLogger(__name__)


class TaskUseCases:
    def __init__(self, store: InMemoryTaskStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    def create_task(self, candidate: TaskInput) -> Task:
        task = self.store.add(candidate)
        logger.info(f"Task {task.id} added: {task.title!r}")
        self.notifier.notify(TASK_ADDED)
        return task

    def get_task(self, task_id: int) -> Optional[Task]:
        return self.store.get(task_id)

    def get_all_tasks(self) -> List[Task]:
        return self.store.list()

    def update_task(self, task_id: int, candidate: TaskInput) -> Optional[Task]:
        task = self.store.update(task_id, candidate)
        if not task:
            logger.warning(f"Update ignored, task {task_id} does not exist")
            return None
        logger.info(f"Task {task_id} updated: {sorted(candidate.changes())}")
        self.notifier.notify(TASK_UPDATED)
        return task

    def delete_task(self, task_id: int) -> bool:
        if not self.store.remove(task_id):
            logger.warning(f"Delete ignored, task {task_id} does not exist")
            return False
        logger.info(f"Task {task_id} deleted")
        self.notifier.notify(TASK_DELETED)
        return True
