from fastapi import Depends

from taskflow.stores import get_task_store
from taskflow.tasks.service import TaskService
from taskflow.tasks.store.base import TaskStore


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)
