"""User domain entity."""

from pydantic import Field

from layered_users.domain._base import Entity


class User(Entity):
    """User entity representing a person in the system.

    Constructed with ``id=None`` by the service layer; the repository assigns
    the identity exactly once when the user is first saved.
    """

    username: str = Field(description="User's login name")
    email: str = Field(description="User's email address")
