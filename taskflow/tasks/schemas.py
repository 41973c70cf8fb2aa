from datetime import datetime
from enum import Enum
from pydantic import BaseModel


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Task(BaseModel):
    id: int | None = None
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    assigned_to_id: int | None = None
    created_at: datetime


class TaskRequest(BaseModel):
    """
    Incoming task payload. Field rules are enforced by
    taskflow.tasks.validation so that every violation is reported at once.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = TaskStatus.PENDING
    assigned_to_id: int | None = None
