import logging

from taskflow.common.current_datetime import get_current_datetime
from taskflow.common.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ResourceType,
    ValidationException,
)
from taskflow.users.schemas import User, UserRequest, UserRole
from taskflow.users.store.base import UserStore
from taskflow.users.validation import validate_user

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_store: UserStore):
        self.user_store = user_store

    def get_all(self) -> list[User]:
        return self.user_store.find_all()

    def get_by_id(self, user_id: int) -> User:
        user = self.user_store.find_by_id(user_id)

        if not user:
            raise ResourceNotFoundException(ResourceType.USER, user_id)

        return user

    def find_by_email(self, email: str) -> User:
        user = self.user_store.find_by_email(email)

        if not user:
            raise ResourceNotFoundException(ResourceType.USER, email, field="email")

        return user

    def create(self, user_input: UserRequest) -> User:
        violations = validate_user(user_input)
        if violations:
            raise ValidationException(violations)

        if self.user_store.find_by_email(user_input.email):  # type: ignore[arg-type]
            raise ResourceAlreadyExistsException(ResourceType.USER, user_input.email)

        user = self.user_store.insert(
            User(
                name=user_input.name,  # type: ignore[arg-type]
                email=user_input.email,  # type: ignore[arg-type]
                role=user_input.role or UserRole.USER,
                created_at=get_current_datetime(),
            )
        )

        logger.info(f"Created user {user.id}")
        return user

    def update(self, user_id: int, user_input: UserRequest) -> User:
        existing_user = self.get_by_id(user_id)

        violations = validate_user(user_input)
        if violations:
            raise ValidationException(violations)

        if user_input.email != existing_user.email and self.user_store.find_by_email(
            user_input.email  # type: ignore[arg-type]
        ):
            raise ResourceAlreadyExistsException(ResourceType.USER, user_input.email)

        updated_user = existing_user.model_copy(
            update={
                "name": user_input.name,
                "email": user_input.email,
                "role": user_input.role,
            }
        )

        user = self.user_store.save(updated_user)

        logger.info(f"Updated user {user_id}")
        return user

    def delete(self, user_id: int) -> None:
        self.get_by_id(user_id)
        self.user_store.delete_by_id(user_id)
        logger.info(f"Deleted user {user_id}")
