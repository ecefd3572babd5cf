import uuid
from dataclasses import dataclass, field
from typing import Optional

@dataclass
class Task:
    description: str = ""
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def new(cls, description: Optional[str] = None, is_completed: Optional[bool] = None) -> "Task":
        """Builds a fresh task with a server-minted id, filling in the defaults."""
        return cls(
            description=description if description is not None else "",
            is_completed=bool(is_completed) if is_completed is not None else False,
        )
