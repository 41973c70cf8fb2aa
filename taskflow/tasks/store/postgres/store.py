from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from taskflow.common.database import as_utc
from taskflow.tasks.schemas import Task, TaskStatus
from taskflow.tasks.store.base import TaskStore
from taskflow.tasks.store.postgres.model import TaskModel


def _to_task(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        status=TaskStatus(model.status),
        assigned_to_id=model.assigned_to_id,
        created_at=as_utc(model.created_at),
    )


class PostgresTaskStore(TaskStore):
    def __init__(self, engine: Engine):
        self.engine = engine
        self.Session = sessionmaker(bind=self.engine)

    def insert(self, task: Task) -> Task:
        with self.Session() as session:
            new_task = TaskModel(
                title=task.title,
                description=task.description,
                status=task.status.value,
                assigned_to_id=task.assigned_to_id,
                created_at=task.created_at,
            )
            session.add(new_task)
            session.commit()
            session.refresh(new_task)
            return _to_task(new_task)

    def find_by_id(self, task_id: int) -> Task | None:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)
            return _to_task(task) if task else None

    def exists_by_id(self, task_id: int) -> bool:
        with self.Session() as session:
            return session.query(
                session.query(TaskModel).filter_by(id=task_id).exists()
            ).scalar()

    def find_all(self) -> list[Task]:
        with self.Session() as session:
            tasks = session.query(TaskModel).order_by(TaskModel.id).all()
            return [_to_task(task) for task in tasks]

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        with self.Session() as session:
            tasks = (
                session.query(TaskModel)
                .filter_by(status=status.value)
                .order_by(TaskModel.id)
                .all()
            )
            return [_to_task(task) for task in tasks]

    def find_by_owner(self, user_id: int) -> list[Task]:
        with self.Session() as session:
            tasks = (
                session.query(TaskModel)
                .filter_by(assigned_to_id=user_id)
                .order_by(TaskModel.id)
                .all()
            )
            return [_to_task(task) for task in tasks]

    def find_by_title_contains(self, keyword: str) -> list[Task]:
        with self.Session() as session:
            tasks = (
                session.query(TaskModel)
                .filter(TaskModel.title.icontains(keyword, autoescape=True))
                .order_by(TaskModel.id)
                .all()
            )
            return [_to_task(task) for task in tasks]

    def save(self, task: Task) -> Task:
        if task.id is None or not self.exists_by_id(task.id):
            return self.insert(task)

        with self.Session() as session:
            existing = session.get_one(TaskModel, task.id)
            existing.title = task.title
            existing.description = task.description
            existing.status = task.status.value
            existing.assigned_to_id = task.assigned_to_id
            existing.created_at = task.created_at
            session.commit()
            session.refresh(existing)
            return _to_task(existing)

    def delete_by_id(self, task_id: int) -> None:
        with self.Session() as session:
            session.query(TaskModel).filter_by(id=task_id).delete()
            session.commit()
