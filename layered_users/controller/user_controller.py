"""User controller."""

from layered_users.domain.user import User
from layered_users.service.user_service import UserService


class UserController:
    """Exposes the user service operations to the hosting surfaces.

    Mounted under ``/user`` by the HTTP app and driven directly by the CLI.
    """

    def __init__(self, user_service: UserService) -> None:
        self._user_service = user_service

    def create_user(self, username: str, email: str) -> User:
        return self._user_service.create_user(username, email)

    def get_user(self, user_id: int) -> User | None:
        return self._user_service.get_user_by_id(user_id)

    def get_all_users(self) -> list[User]:
        return self._user_service.get_all_users()

    def delete_user(self, user_id: int) -> None:
        self._user_service.delete_user(user_id)
