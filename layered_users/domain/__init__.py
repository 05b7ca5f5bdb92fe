"""Domain layer: entities and their persistence rows.

Nothing in this package may import from the controller, service or
repository packages.
"""

from .user import User, UserTable

__all__ = ["User", "UserTable"]
