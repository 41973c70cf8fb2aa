from fastapi import Depends

from taskflow.stores import get_user_store
from taskflow.users.service import UserService
from taskflow.users.store.base import UserStore


def get_user_service(
    user_store: UserStore = Depends(get_user_store),
) -> UserService:
    return UserService(user_store=user_store)
