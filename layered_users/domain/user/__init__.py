"""User entity module.

- User: immutable domain entity
- UserTable: database persistence model
"""

from .entity import User
from .table import UserTable

__all__ = ["User", "UserTable"]
