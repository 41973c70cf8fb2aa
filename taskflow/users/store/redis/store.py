from datetime import datetime
from typing import TypedDict

from taskflow.common.exceptions import ResourceAlreadyExistsException, ResourceType
from taskflow.common.redis import RedisClient
from taskflow.users.schemas import User, UserRole
from taskflow.users.store.base import UserStore


class UserMapping(TypedDict):
    id: int
    name: str
    email: str
    role: str
    created_at: str


class RedisUserStore(UserStore):
    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix
        self.counter_key = f"{key_prefix}:id_counter"
        self.index_key = f"{key_prefix}:ids"

    def _get_user_key(self, user_id: int) -> str:
        return f"{self.key_prefix}:{user_id}"

    def _get_email_key(self, email: str) -> str:
        return f"{self.key_prefix}:email:{email}"

    def _claim_email(self, email: str, user_id: int) -> None:
        if not self.client.set(self._get_email_key(email), user_id, nx=True):
            raise ResourceAlreadyExistsException(ResourceType.USER, email)

    def _write(self, user: User, user_id: int) -> User:
        mapping: UserMapping = {
            "id": user_id,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "created_at": user.created_at.isoformat(),
        }
        self.client.hset(self._get_user_key(user_id), mapping=mapping)  # type: ignore
        self.client.zadd(self.index_key, {str(user_id): user_id})
        return user.model_copy(update={"id": user_id})

    def insert(self, user: User) -> User:
        user_id = int(self.client.incr(self.counter_key))
        self._claim_email(user.email, user_id)
        return self._write(user, user_id)

    def find_by_id(self, user_id: int) -> User | None:
        data = self.client.hgetall(self._get_user_key(user_id))
        if not data:
            return None

        return User(
            id=int(data["id"]),
            name=data["name"],
            email=data["email"],
            role=UserRole(data["role"]),
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def exists_by_id(self, user_id: int) -> bool:
        return bool(self.client.exists(self._get_user_key(user_id)))

    def find_all(self) -> list[User]:
        users: list[User] = []
        for user_id in self.client.zrange(self.index_key, 0, -1):
            user = self.find_by_id(int(user_id))
            if user:
                users.append(user)
        return users

    def find_by_email(self, email: str) -> User | None:
        user_id = self.client.get(self._get_email_key(email))
        if user_id is None:
            return None
        return self.find_by_id(int(user_id))

    def save(self, user: User) -> User:
        current = self.find_by_id(user.id) if user.id is not None else None
        if current is None:
            return self.insert(user)

        if current.email != user.email:
            self._claim_email(user.email, current.id)  # type: ignore[arg-type]
            self.client.delete(self._get_email_key(current.email))

        return self._write(user, current.id)  # type: ignore[arg-type]

    def delete_by_id(self, user_id: int) -> None:
        current = self.find_by_id(user_id)
        if current is None:
            return

        self.client.delete(
            self._get_user_key(user_id), self._get_email_key(current.email)
        )
        self.client.zrem(self.index_key, str(user_id))
