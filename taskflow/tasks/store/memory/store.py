import threading
from itertools import count

from taskflow.tasks.schemas import Task, TaskStatus
from taskflow.tasks.store.base import TaskStore


class InMemoryTaskStore(TaskStore):
    def __init__(self):
        self._tasks: dict[int, Task] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def insert(self, task: Task) -> Task:
        with self._lock:
            stored = task.model_copy(update={"id": next(self._ids)})
            self._tasks[stored.id] = stored  # type: ignore[index]
            return stored.model_copy()

    def find_by_id(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def exists_by_id(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._tasks

    def _select(self, predicate=lambda task: True) -> list[Task]:
        with self._lock:
            return [
                task.model_copy()
                for _, task in sorted(self._tasks.items())
                if predicate(task)
            ]

    def find_all(self) -> list[Task]:
        return self._select()

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return self._select(lambda task: task.status == status)

    def find_by_owner(self, user_id: int) -> list[Task]:
        return self._select(lambda task: task.assigned_to_id == user_id)

    def find_by_title_contains(self, keyword: str) -> list[Task]:
        keyword = keyword.casefold()
        return self._select(lambda task: keyword in task.title.casefold())

    def save(self, task: Task) -> Task:
        with self._lock:
            if task.id is not None and task.id in self._tasks:
                self._tasks[task.id] = task.model_copy()
                return task.model_copy()
        return self.insert(task)

    def delete_by_id(self, task_id: int) -> None:
        with self._lock:
            self._tasks.pop(task_id, None)
