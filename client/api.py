import uuid
from typing import List, Optional, Union

import httpx

import config
from schemas.task import TaskResponse

TASKS_PATH = "/api/tasks"

class TaskApiClient:
    """Async wrapper over the four task endpoints.

    Errors are not handled here: a non-2xx answer raises
    ``httpx.HTTPStatusError`` and transport failures raise
    ``httpx.RequestError``, both straight to the caller.
    """

    def __init__(self, base_url: str = config.API_BASE_URL, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
            timeout=30.0,
        )

    async def __aenter__(self) -> "TaskApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def get_tasks(self) -> List[TaskResponse]:
        response = await self._client.get(TASKS_PATH)
        response.raise_for_status()
        return [TaskResponse.model_validate(item) for item in response.json()]

    async def add_task(self, description: str) -> TaskResponse:
        response = await self._client.post(TASKS_PATH, json={"description": description, "isCompleted": False})
        response.raise_for_status()
        return TaskResponse.model_validate(response.json())

    async def update_task(self, task: TaskResponse) -> None:
        response = await self._client.put(f"{TASKS_PATH}/{task.id}", json=task.to_json())
        response.raise_for_status()

    async def delete_task(self, task_id: Union[uuid.UUID, str]) -> None:
        response = await self._client.delete(f"{TASKS_PATH}/{task_id}")
        response.raise_for_status()
