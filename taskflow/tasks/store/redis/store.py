from datetime import datetime
from typing import TypedDict

from taskflow.common.redis import RedisClient
from taskflow.tasks.schemas import Task, TaskStatus
from taskflow.tasks.store.base import TaskStore


class TaskMapping(TypedDict, total=False):
    id: int
    title: str
    description: str
    status: str
    assigned_to_id: int
    created_at: str


OPTIONAL_FIELDS = ("description", "assigned_to_id")


class RedisTaskStore(TaskStore):
    """
    Each task is a hash under '{key_prefix}:{id}'. Ids come from an
    INCR counter and are indexed in a sorted set (scored by id) so scans
    return tasks in a stable order. Filters are evaluated client-side.
    """

    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix
        self.counter_key = f"{key_prefix}:id_counter"
        self.index_key = f"{key_prefix}:ids"

    def _get_task_key(self, task_id: int) -> str:
        return f"{self.key_prefix}:{task_id}"

    def _to_mapping(self, task: Task, task_id: int) -> TaskMapping:
        mapping: TaskMapping = {
            "id": task_id,
            "title": task.title,
            "status": task.status.value,
            "created_at": task.created_at.isoformat(),
        }
        if task.description is not None:
            mapping["description"] = task.description
        if task.assigned_to_id is not None:
            mapping["assigned_to_id"] = task.assigned_to_id
        return mapping

    def _write(self, task: Task, task_id: int) -> Task:
        task_key = self._get_task_key(task_id)
        self.client.hset(task_key, mapping=self._to_mapping(task, task_id))  # type: ignore

        missing_fields = [
            field for field in OPTIONAL_FIELDS if getattr(task, field) is None
        ]
        if missing_fields:
            self.client.hdel(task_key, *missing_fields)

        self.client.zadd(self.index_key, {str(task_id): task_id})
        return task.model_copy(update={"id": task_id})

    def insert(self, task: Task) -> Task:
        task_id = int(self.client.incr(self.counter_key))
        return self._write(task, task_id)

    def find_by_id(self, task_id: int) -> Task | None:
        data = self.client.hgetall(self._get_task_key(task_id))
        if not data:
            return None

        assigned_to_id = data.get("assigned_to_id")
        return Task(
            id=int(data["id"]),
            title=data["title"],
            description=data.get("description"),
            status=TaskStatus(data["status"]),
            assigned_to_id=int(assigned_to_id) if assigned_to_id else None,
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def exists_by_id(self, task_id: int) -> bool:
        return bool(self.client.exists(self._get_task_key(task_id)))

    def find_all(self) -> list[Task]:
        tasks: list[Task] = []
        for task_id in self.client.zrange(self.index_key, 0, -1):
            task = self.find_by_id(int(task_id))
            if task:
                tasks.append(task)
        return tasks

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return [task for task in self.find_all() if task.status == status]

    def find_by_owner(self, user_id: int) -> list[Task]:
        return [task for task in self.find_all() if task.assigned_to_id == user_id]

    def find_by_title_contains(self, keyword: str) -> list[Task]:
        keyword = keyword.casefold()
        return [task for task in self.find_all() if keyword in task.title.casefold()]

    def save(self, task: Task) -> Task:
        if task.id is None or not self.exists_by_id(task.id):
            return self.insert(task)
        return self._write(task, task.id)

    def delete_by_id(self, task_id: int) -> None:
        self.client.delete(self._get_task_key(task_id))
        self.client.zrem(self.index_key, str(task_id))
