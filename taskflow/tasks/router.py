from fastapi import APIRouter, status, Depends

from taskflow.common.exceptions import (
    ResourceType,
    resource_not_found_response,
)
from taskflow.tasks.dependencies import get_task_service
from taskflow.tasks.schemas import Task, TaskRequest, TaskStatus
from taskflow.tasks.service import TaskService


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
)


@router.get("")
def list_tasks(
    status: TaskStatus | None = None,
    owner_id: int | None = None,
    title: str | None = None,
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    # Only one filter applies; status wins over owner_id, owner_id over title
    if status is not None:
        return task_service.get_by_status(status)
    if owner_id is not None:
        return task_service.get_by_owner(owner_id)
    if title is not None:
        return task_service.search_by_title(title)
    return task_service.get_all()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    task_input: TaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create(task_input)


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: int, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_by_id(task_id)


@router.put("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def update_task(
    task_id: int,
    task_input: TaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update(task_id, task_input)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(task_id: int, task_service: TaskService = Depends(get_task_service)):
    task_service.delete(task_id)
