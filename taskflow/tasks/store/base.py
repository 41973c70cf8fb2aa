from abc import ABC, abstractmethod

from taskflow.tasks.schemas import Task, TaskStatus


class TaskStore(ABC):
    @abstractmethod
    def insert(self, task: Task) -> Task:
        """Store a new task under a freshly assigned id and return it"""
        pass

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        pass

    @abstractmethod
    def exists_by_id(self, task_id: int) -> bool:
        pass

    @abstractmethod
    def find_all(self) -> list[Task]:
        pass

    @abstractmethod
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        pass

    @abstractmethod
    def find_by_owner(self, user_id: int) -> list[Task]:
        pass

    @abstractmethod
    def find_by_title_contains(self, keyword: str) -> list[Task]:
        """Case-insensitive substring match on the title"""
        pass

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Replace the stored task with the same id, inserting it if absent"""
        pass

    @abstractmethod
    def delete_by_id(self, task_id: int) -> None:
        """Remove the task if present; a missing id is a no-op"""
        pass
