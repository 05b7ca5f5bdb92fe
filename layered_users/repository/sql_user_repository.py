"""SQLModel-backed user storage."""

from loguru import logger
from sqlmodel import Session, select

from layered_users.domain.user import User, UserTable
from layered_users.repository.user_repository import UserRepository


class SqlUserRepository(UserRepository):
    """Data-access layer for users stored in a relational database.

    Each mutating call runs in its own transaction and commits before
    returning. Identity is generated by the database.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, user: User) -> User:
        row = None
        if user.id is not None:
            row = self._session.get(UserTable, user.id)
        if row is None:
            row = UserTable(id=user.id, username=user.username, email=user.email)
        else:
            row.username = user.username
            row.email = user.email

        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.debug("Saved user id={} username={}", row.id, row.username)
        return User.model_validate(row, from_attributes=True)

    def find_by_id(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def find_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.id)
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def delete_by_id(self, user_id: int) -> None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()
        logger.debug("Deleted user id={}", user_id)
