import logging
import threading
import uuid
from dataclasses import replace
from typing import List, Optional
from domain.entities import Task

logger = logging.getLogger(__name__)

class InMemoryTaskStore:
    """Process-lifetime task collection.

    Tasks live only in memory and are gone after a restart. Every operation
    takes the store lock, so concurrent request handlers never see a
    half-applied mutation. Callers get copies, never the stored records.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._lock = threading.Lock()

    def list(self) -> List[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get(self, task_id: uuid.UUID) -> Optional[Task]:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return replace(task)
            return None

    def create(self, description: Optional[str] = None, is_completed: Optional[bool] = None) -> Task:
        task = Task.new(description, is_completed)
        with self._lock:
            # uuid4 collisions are practically impossible, but the id must stay unique
            while any(existing.id == task.id for existing in self._tasks):
                task.id = uuid.uuid4()
            self._tasks.append(task)
        logger.debug(f"Stored task {task.id}")
        return replace(task)

    def update(self, task_id: uuid.UUID, description: str, is_completed: bool) -> bool:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    task.description = description
                    task.is_completed = is_completed
                    logger.debug(f"Updated task {task_id}")
                    return True
        return False

    def delete(self, task_id: uuid.UUID) -> bool:
        with self._lock:
            before = len(self._tasks)
            self._tasks = [task for task in self._tasks if task.id != task_id]
            removed = before - len(self._tasks)
        logger.debug(f"Removed {removed} task(s) with id {task_id}")
        return removed > 0
