# interfaces/api.py
import uuid
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from schemas.task import TaskCreate, TaskUpdate, TaskResponse
from application.use_cases import TaskUseCases

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

def get_use_cases(request: Request) -> TaskUseCases:
    """Hands the application's own use-case object to each request."""
    return request.app.state.use_cases

@router.get("", response_model=List[TaskResponse], response_model_by_alias=True)
async def get_all_tasks(use_cases: TaskUseCases = Depends(get_use_cases)):
    return [TaskResponse.from_entity(task) for task in use_cases.get_all_tasks()]

@router.post(
    "",
    response_model=TaskResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(task: TaskCreate, response: Response, use_cases: TaskUseCases = Depends(get_use_cases)):
    created_task = use_cases.create_task(task.description, task.is_completed)
    response.headers["Location"] = f"{router.prefix}/{created_task.id}"
    return TaskResponse.from_entity(created_task)

@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_task(task_id: uuid.UUID, task: TaskUpdate, use_cases: TaskUseCases = Depends(get_use_cases)):
    if not use_cases.update_task(task_id, task.description, task.is_completed):
        raise HTTPException(status_code=404, detail="Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(task_id: uuid.UUID, use_cases: TaskUseCases = Depends(get_use_cases)):
    if not use_cases.delete_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
