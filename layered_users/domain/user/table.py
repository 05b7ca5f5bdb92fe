"""User database table model."""

from layered_users.domain._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity so the entity stays immutable.
    """

    __tablename__ = "users"

    username: str
    email: str
