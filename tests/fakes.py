import json
import uuid
from typing import Dict, List, Optional

import httpx


class FakeTaskServer:
    """In-memory stand-in for the task API, served through httpx.MockTransport.

    Records every request so tests can assert which calls were made, and
    can be told to fail the next requests with a given status code.
    """

    def __init__(self, tasks: Optional[List[dict]] = None):
        self.tasks: List[dict] = list(tasks or [])
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[int] = None
        self.offline = False

    def add(self, description: str, is_completed: bool = False) -> dict:
        task = {"id": str(uuid.uuid4()), "description": description, "isCompleted": is_completed}
        self.tasks.append(task)
        return task

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("server unreachable", request=request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with)

        parts = request.url.path.strip("/").split("/")
        task_id = parts[2] if len(parts) > 2 else None
        if request.method == "GET":
            return httpx.Response(200, json=self.tasks)
        if request.method == "POST":
            body: Dict = json.loads(request.content)
            task = self.add(body.get("description", ""), body.get("isCompleted", False))
            return httpx.Response(201, json=task, headers={"Location": f"/api/tasks/{task['id']}"})
        for index, task in enumerate(self.tasks):
            if task["id"] == task_id:
                if request.method == "PUT":
                    body = json.loads(request.content)
                    task.update(description=body["description"], isCompleted=body["isCompleted"])
                else:
                    del self.tasks[index]
                return httpx.Response(204)
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self), base_url="http://testserver")
