"""Controller layer: the process boundary. No other layer may import it."""

from .user_controller import UserController

__all__ = ["UserController"]
