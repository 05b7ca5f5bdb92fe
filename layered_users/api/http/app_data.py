"""Application-wide dependencies and the wiring of the user layers.

This module is the composition root: it is the only place outside the
layers that constructs repositories, services and controllers.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from loguru import logger

from layered_users.controller.user_controller import UserController
from layered_users.repository.in_memory_user_repository import InMemoryUserRepository
from layered_users.repository.sql_user_repository import SqlUserRepository
from layered_users.repository.user_repository import UserRepository
from layered_users.runtime.db import Database
from layered_users.runtime.settings import Settings
from layered_users.service.user_service import UserService


@dataclass
class ApplicationDependencies:
    settings: Settings
    database: Database | None = None
    memory_repository: InMemoryUserRepository = field(
        default_factory=InMemoryUserRepository
    )

    def close(self) -> None:
        if self.database is not None:
            self.database.dispose()


def build_dependencies(settings: Settings) -> ApplicationDependencies:
    """Create the storage backend selected by ``settings``."""
    if not settings.uses_database:
        logger.info("Using in-memory user repository")
        return ApplicationDependencies(settings=settings)

    database = Database(settings.database_url, echo=settings.database_echo)
    database.create_all()
    return ApplicationDependencies(settings=settings, database=database)


@contextmanager
def open_user_repository(app_deps: ApplicationDependencies) -> Iterator[UserRepository]:
    """Yield a repository for one unit of work.

    With a database configured, the repository runs inside
    ``Database.session_scope``: an error raised by the caller rolls the
    session back and propagates.
    """
    if app_deps.database is None:
        yield app_deps.memory_repository
        return

    with app_deps.database.session_scope() as session:
        yield SqlUserRepository(session)


@contextmanager
def open_user_controller(app_deps: ApplicationDependencies) -> Iterator[UserController]:
    """Yield a fully wired controller for one unit of work."""
    with open_user_repository(app_deps) as repository:
        yield UserController(UserService(repository))
