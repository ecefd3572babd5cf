import logging
import uuid
from typing import List, Optional
from domain.entities import Task
from infrastructure.task_store import InMemoryTaskStore

logger = logging.getLogger(__name__)

class TaskUseCases:
    def __init__(self, store: InMemoryTaskStore):
        self.store = store

    def create_task(self, description: Optional[str] = None, is_completed: Optional[bool] = None) -> Task:
        task = self.store.create(description, is_completed)
        logger.info(f"Created task {task.id}")
        return task

    def get_all_tasks(self) -> List[Task]:
        return self.store.list()

    def update_task(self, task_id: uuid.UUID, description: str = "", is_completed: bool = False) -> bool:
        if not self.store.update(task_id, description, is_completed):
            logger.warning(f"Update requested for unknown task {task_id}")
            return False
        logger.info(f"Updated task {task_id}: completed = {is_completed}")
        return True

    def delete_task(self, task_id: uuid.UUID) -> bool:
        if not self.store.delete(task_id):
            logger.warning(f"Delete requested for unknown task {task_id}")
            return False
        logger.info(f"Deleted task {task_id}")
        return True

    def count_tasks(self) -> int:
        return self.store.count()
