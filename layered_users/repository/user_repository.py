"""Persistence contract for users."""

from abc import ABC, abstractmethod

from layered_users.domain.user import User


class UserRepository(ABC):
    """Data-access contract for users.

    Implementations assign the identity of a user on its first save. Lookups
    signal absence with ``None``; deleting an unknown id is a no-op.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """Persist ``user`` and return the stored entity with its id set."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Return the user stored under ``user_id``, or None."""

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user ordered by id."""

    @abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        """Remove the user stored under ``user_id`` if there is one."""
