"""User service."""

from layered_users.domain.user import User
from layered_users.repository.user_repository import UserRepository


class UserService:
    """Delegates user operations to a repository.

    Failures raised by the repository propagate unchanged.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def create_user(self, username: str, email: str) -> User:
        user = User(id=None, username=username, email=email)
        return self._user_repository.save(user)

    def get_user_by_id(self, user_id: int) -> User | None:
        return self._user_repository.find_by_id(user_id)

    def get_all_users(self) -> list[User]:
        return self._user_repository.find_all()

    def delete_user(self, user_id: int) -> None:
        self._user_repository.delete_by_id(user_id)
