from fastapi import APIRouter, status, Depends

from taskflow.common.exceptions import (
    ResourceType,
    resource_already_exists_response,
    resource_not_found_response,
)
from taskflow.tasks.dependencies import get_task_service
from taskflow.tasks.schemas import Task
from taskflow.tasks.service import TaskService
from taskflow.users.dependencies import get_user_service
from taskflow.users.schemas import User, UserRequest
from taskflow.users.service import UserService


router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)


@router.get("")
def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[User]:
    return user_service.get_all()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={**resource_already_exists_response(ResourceType.USER)},
)
def create_user(
    user_input: UserRequest,
    user_service: UserService = Depends(get_user_service),
) -> User:
    return user_service.create(user_input)


@router.get("/by-email", responses={**resource_not_found_response(ResourceType.USER)})
def get_user_by_email(
    email: str, user_service: UserService = Depends(get_user_service)
) -> User:
    return user_service.find_by_email(email)


@router.get("/{user_id}", responses={**resource_not_found_response(ResourceType.USER)})
def get_user(
    user_id: int, user_service: UserService = Depends(get_user_service)
) -> User:
    return user_service.get_by_id(user_id)


@router.get(
    "/{user_id}/tasks", responses={**resource_not_found_response(ResourceType.USER)}
)
def get_user_tasks(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    user_service.get_by_id(user_id)
    return task_service.get_by_owner(user_id)


@router.put(
    "/{user_id}",
    responses={
        **resource_not_found_response(ResourceType.USER),
        **resource_already_exists_response(ResourceType.USER),
    },
)
def update_user(
    user_id: int,
    user_input: UserRequest,
    user_service: UserService = Depends(get_user_service),
) -> User:
    return user_service.update(user_id, user_input)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.USER)},
)
def delete_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    user_service.delete(user_id)
