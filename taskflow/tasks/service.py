import logging

from taskflow.common.current_datetime import get_current_datetime
from taskflow.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    ValidationException,
)
from taskflow.tasks.schemas import Task, TaskRequest, TaskStatus
from taskflow.tasks.store.base import TaskStore
from taskflow.tasks.validation import validate_task

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    def get_all(self) -> list[Task]:
        return self.task_store.find_all()

    def get_by_id(self, task_id: int) -> Task:
        task = self.task_store.find_by_id(task_id)

        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        return task

    def create(self, task_input: TaskRequest) -> Task:
        violations = validate_task(task_input)
        if violations:
            raise ValidationException(violations)

        task = self.task_store.insert(
            Task(
                title=task_input.title,  # type: ignore[arg-type]
                description=task_input.description,
                status=task_input.status or TaskStatus.PENDING,
                assigned_to_id=task_input.assigned_to_id,
                created_at=get_current_datetime(),
            )
        )

        logger.info(f"Created task {task.id}")
        return task

    def update(self, task_id: int, task_input: TaskRequest) -> Task:
        existing_task = self.get_by_id(task_id)

        violations = validate_task(task_input)
        if violations:
            raise ValidationException(violations)

        updated_task = existing_task.model_copy(
            update={
                "title": task_input.title,
                "description": task_input.description,
                "status": task_input.status,
            }
        )

        task = self.task_store.save(updated_task)

        logger.info(f"Updated task {task_id}")
        return task

    def delete(self, task_id: int) -> None:
        self.get_by_id(task_id)
        self.task_store.delete_by_id(task_id)
        logger.info(f"Deleted task {task_id}")

    def search_by_title(self, keyword: str) -> list[Task]:
        return self.task_store.find_by_title_contains(keyword)

    def get_by_owner(self, user_id: int) -> list[Task]:
        return self.task_store.find_by_owner(user_id)

    def get_by_status(self, status: TaskStatus) -> list[Task]:
        return self.task_store.find_by_status(status)
