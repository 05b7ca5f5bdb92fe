"""Repository layer: persistence contracts and their implementations."""

from .in_memory_user_repository import InMemoryUserRepository
from .sql_user_repository import SqlUserRepository
from .user_repository import UserRepository

__all__ = ["UserRepository", "InMemoryUserRepository", "SqlUserRepository"]
