"""Service layer: orchestrates repository calls for the controllers."""

from .user_service import UserService

__all__ = ["UserService"]
