"""Shared pytest fixtures."""

from .cli import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
