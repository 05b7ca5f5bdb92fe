"""Process-local user storage."""

import itertools
import threading

from loguru import logger

from layered_users.domain.user import User
from layered_users.repository.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed repository used when no database is configured.

    Identifiers come from a counter starting at 1 and are never reused, even
    after a delete.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, user: User) -> User:
        with self._lock:
            if user.id is None:
                new_id = next(self._ids)
                while new_id in self._users:
                    new_id = next(self._ids)
                user = user.model_copy(update={"id": new_id})
            self._users[user.id] = user
        logger.debug("Saved user id={} username={}", user.id, user.username)
        return user

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_all(self) -> list[User]:
        with self._lock:
            return [self._users[key] for key in sorted(self._users)]

    def delete_by_id(self, user_id: int) -> None:
        with self._lock:
            removed = self._users.pop(user_id, None)
        if removed is not None:
            logger.debug("Deleted user id={}", user_id)
