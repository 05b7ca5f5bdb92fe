"""Test configuration and fixtures for layered-users."""

from tests.fixtures import *  # noqa: F401,F403
