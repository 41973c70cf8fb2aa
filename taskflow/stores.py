from dataclasses import dataclass
import logging
from fastapi import Request
from sqlalchemy import Engine

from taskflow.common.database import create_db_engine
from taskflow.common.redis import RedisClient, create_redis_client
from taskflow.config import Settings
from taskflow.tasks.store.base import TaskStore
from taskflow.tasks.store.memory.store import InMemoryTaskStore
from taskflow.tasks.store.postgres.store import PostgresTaskStore
from taskflow.tasks.store.redis.store import RedisTaskStore
from taskflow.users.store.base import UserStore
from taskflow.users.store.memory.store import InMemoryUserStore
from taskflow.users.store.postgres.store import PostgresUserStore
from taskflow.users.store.redis.store import RedisUserStore

logger = logging.getLogger(__name__)


@dataclass
class StoreBackend:
    task_store: TaskStore
    user_store: UserStore
    db_engine: Engine | None = None
    redis_client: RedisClient | None = None

    def close(self) -> None:
        if self.db_engine is not None:
            self.db_engine.dispose()
        if self.redis_client is not None:
            self.redis_client.close()


def create_store_backend(settings: Settings) -> StoreBackend:
    logger.info(f"Using {settings.STORE_BACKEND} store backend")

    if settings.STORE_BACKEND == "postgres":
        engine = create_db_engine(settings.POSTGRES_URL)
        return StoreBackend(
            task_store=PostgresTaskStore(engine),
            user_store=PostgresUserStore(engine),
            db_engine=engine,
        )
    elif settings.STORE_BACKEND == "redis":
        redis_client = create_redis_client(settings.REDIS_URL)
        return StoreBackend(
            task_store=RedisTaskStore(
                redis_client=redis_client, key_prefix=settings.TASKS_NAMESPACE
            ),
            user_store=RedisUserStore(
                redis_client=redis_client, key_prefix=settings.USERS_NAMESPACE
            ),
            redis_client=redis_client,
        )
    elif settings.STORE_BACKEND == "memory":
        return StoreBackend(
            task_store=InMemoryTaskStore(),
            user_store=InMemoryUserStore(),
        )
    else:
        raise ValueError(f"Unsupported store backend: {settings.STORE_BACKEND}")


def get_store_backend(request: Request) -> StoreBackend:
    return request.app.state.store_backend


def get_task_store(request: Request) -> TaskStore:
    return get_store_backend(request).task_store


def get_user_store(request: Request) -> UserStore:
    return get_store_backend(request).user_store
