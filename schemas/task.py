import uuid
from pydantic import BaseModel, ConfigDict, Field
from domain.entities import Task

class TaskBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    description: str = ""
    is_completed: bool = Field(default=False, alias="isCompleted")

class TaskCreate(TaskBase):
    pass

class TaskUpdate(TaskBase):
    pass

class TaskResponse(TaskBase):
    id: uuid.UUID

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(id=task.id, description=task.description, is_completed=task.is_completed)

    def to_json(self) -> dict:
        """Wire shape: {"id": str, "description": str, "isCompleted": bool}."""
        return self.model_dump(mode="json", by_alias=True)
