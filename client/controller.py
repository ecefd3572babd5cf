import asyncio
import logging
import uuid
from enum import Enum
from typing import Callable, Iterable, List, Optional, Union

import httpx
from pydantic import TypeAdapter

from client.api import TaskApiClient
from client.cache import TASKS_CACHE_KEY, LocalStorage
from schemas.task import TaskResponse

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(List[TaskResponse])

# Failures a user flow absorbs: HTTP/transport errors and payloads that do not validate
FLOW_ERRORS = (httpx.HTTPError, ValueError)


def _as_uuid(task_id: Union[uuid.UUID, str]) -> Optional[uuid.UUID]:
    if isinstance(task_id, uuid.UUID):
        return task_id
    try:
        return uuid.UUID(str(task_id))
    except ValueError:
        return None


class TaskFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


def apply_filter(tasks: Iterable[TaskResponse], task_filter: TaskFilter) -> List[TaskResponse]:
    if task_filter == TaskFilter.ACTIVE:
        return [task for task in tasks if not task.is_completed]
    if task_filter == TaskFilter.COMPLETED:
        return [task for task in tasks if task.is_completed]
    return list(tasks)


class TaskController:
    """Client-side task list kept in step with the server.

    The server is authoritative. A mutation is sent first and only applied to
    the local list (and the storage cache) once the server confirms it, so a
    failed call leaves everything as it was. The cache is only read once,
    for the first paint, and a fetched list always replaces it outright.
    """

    def __init__(
        self,
        api: TaskApiClient,
        storage: LocalStorage,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.api = api
        self.storage = storage
        self.on_change = on_change
        self.tasks: List[TaskResponse] = []
        self.filter = TaskFilter.ALL

    @property
    def visible_tasks(self) -> List[TaskResponse]:
        return apply_filter(self.tasks, self.filter)

    def set_filter(self, task_filter: Union[TaskFilter, str]) -> None:
        self.filter = TaskFilter(task_filter)
        self._notify()

    def restore_cache(self) -> bool:
        saved = self.storage.get_item(TASKS_CACHE_KEY)
        if not saved:
            return False
        try:
            self.tasks = _TASK_LIST.validate_json(saved)
        except ValueError:
            return False
        self._notify()
        return True

    async def start(self) -> None:
        """Paints the cached list, if any, while the first fetch is in flight."""
        fetch = asyncio.create_task(self.refresh())
        self.restore_cache()
        await fetch

    async def refresh(self) -> bool:
        try:
            tasks = await self.api.get_tasks()
        except FLOW_ERRORS as e:
            logger.error(f"Failed to fetch tasks: {e}")
            return False
        self._commit(tasks)
        return True

    async def add(self, description: str) -> Optional[TaskResponse]:
        description = description.strip()
        if not description:
            return None
        try:
            created = await self.api.add_task(description)
        except FLOW_ERRORS as e:
            logger.error(f"Failed to add task: {e}")
            return None
        self._commit([*self.tasks, created])
        return created

    async def toggle(self, task_id: Union[uuid.UUID, str]) -> Optional[TaskResponse]:
        task = self._find(task_id)
        if task is None:
            logger.warning(f"Cannot toggle unknown task {task_id}")
            return None
        updated = task.model_copy(update={"is_completed": not task.is_completed})
        try:
            await self.api.update_task(updated)
        except FLOW_ERRORS as e:
            logger.error(f"Failed to update task {task.id}: {e}")
            return None
        self._commit([updated if t.id == task.id else t for t in self.tasks])
        return updated

    async def delete(self, task_id: Union[uuid.UUID, str]) -> bool:
        try:
            await self.api.delete_task(task_id)
        except FLOW_ERRORS as e:
            logger.error(f"Failed to delete task {task_id}: {e}")
            return False
        removed_id = _as_uuid(task_id)
        self._commit([t for t in self.tasks if t.id != removed_id])
        return True

    def _find(self, task_id: Union[uuid.UUID, str]) -> Optional[TaskResponse]:
        wanted = _as_uuid(task_id)
        for task in self.tasks:
            if task.id == wanted:
                return task
        return None

    def _commit(self, tasks: List[TaskResponse]) -> None:
        self.tasks = tasks
        try:
            self.storage.set_item(TASKS_CACHE_KEY, _TASK_LIST.dump_json(tasks, by_alias=True).decode("utf-8"))
        except OSError as e:
            # change is already confirmed by the server; memory keeps it
            logger.error(f"Failed to write task cache {self.storage.path}: {e}")
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
