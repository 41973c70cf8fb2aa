import threading
from itertools import count

from taskflow.common.exceptions import ResourceAlreadyExistsException, ResourceType
from taskflow.users.schemas import User
from taskflow.users.store.base import UserStore


class InMemoryUserStore(UserStore):
    def __init__(self):
        self._users: dict[int, User] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def _email_taken(self, email: str, user_id: int | None) -> bool:
        return any(
            user.email == email and user.id != user_id for user in self._users.values()
        )

    def insert(self, user: User) -> User:
        with self._lock:
            if self._email_taken(user.email, None):
                raise ResourceAlreadyExistsException(ResourceType.USER, user.email)

            stored = user.model_copy(update={"id": next(self._ids)})
            self._users[stored.id] = stored  # type: ignore[index]
            return stored.model_copy()

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def exists_by_id(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def find_all(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for _, user in sorted(self._users.items())]

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user.model_copy()
            return None

    def save(self, user: User) -> User:
        with self._lock:
            if user.id is not None and user.id in self._users:
                if self._email_taken(user.email, user.id):
                    raise ResourceAlreadyExistsException(ResourceType.USER, user.email)
                self._users[user.id] = user.model_copy()
                return user.model_copy()
        return self.insert(user)

    def delete_by_id(self, user_id: int) -> None:
        with self._lock:
            self._users.pop(user_id, None)
