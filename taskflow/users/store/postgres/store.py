from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import IntegrityError

from taskflow.common.database import as_utc
from taskflow.common.exceptions import ResourceAlreadyExistsException, ResourceType
from taskflow.users.schemas import User, UserRole
from taskflow.users.store.base import UserStore
from taskflow.users.store.postgres.model import UserModel


def _to_user(model: UserModel) -> User:
    return User(
        id=model.id,
        name=model.name,
        email=model.email,
        role=UserRole(model.role),
        created_at=as_utc(model.created_at),
    )


class PostgresUserStore(UserStore):
    def __init__(self, engine: Engine):
        self.engine = engine
        self.Session = sessionmaker(bind=self.engine)

    def insert(self, user: User) -> User:
        with self.Session() as session:
            new_user = UserModel(
                name=user.name,
                email=user.email,
                role=user.role.value,
                created_at=user.created_at,
            )

            try:
                session.add(new_user)
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise ResourceAlreadyExistsException(
                    ResourceType.USER, user.email
                ) from e

            session.refresh(new_user)
            return _to_user(new_user)

    def find_by_id(self, user_id: int) -> User | None:
        with self.Session() as session:
            user = session.get(UserModel, user_id)
            return _to_user(user) if user else None

    def exists_by_id(self, user_id: int) -> bool:
        with self.Session() as session:
            return session.query(
                session.query(UserModel).filter_by(id=user_id).exists()
            ).scalar()

    def find_all(self) -> list[User]:
        with self.Session() as session:
            users = session.query(UserModel).order_by(UserModel.id).all()
            return [_to_user(user) for user in users]

    def find_by_email(self, email: str) -> User | None:
        with self.Session() as session:
            user = session.query(UserModel).filter_by(email=email).first()
            return _to_user(user) if user else None

    def save(self, user: User) -> User:
        if user.id is None or not self.exists_by_id(user.id):
            return self.insert(user)

        with self.Session() as session:
            existing = session.get_one(UserModel, user.id)
            existing.name = user.name
            existing.email = user.email
            existing.role = user.role.value
            existing.created_at = user.created_at

            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise ResourceAlreadyExistsException(
                    ResourceType.USER, user.email
                ) from e

            session.refresh(existing)
            return _to_user(existing)

    def delete_by_id(self, user_id: int) -> None:
        with self.Session() as session:
            session.query(UserModel).filter_by(id=user_id).delete()
            session.commit()
