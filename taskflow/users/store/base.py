from abc import ABC, abstractmethod

from taskflow.users.schemas import User


class UserStore(ABC):
    @abstractmethod
    def insert(self, user: User) -> User:
        """
        Store a new user under a freshly assigned id.

        Raises ResourceAlreadyExistsException when the email is taken.
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        pass

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        pass

    @abstractmethod
    def find_all(self) -> list[User]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        pass

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        pass
