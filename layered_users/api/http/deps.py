"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request

from layered_users.api.http.app_data import (
    ApplicationDependencies,
    open_user_repository,
)
from layered_users.controller.user_controller import UserController
from layered_users.repository.user_repository import UserRepository
from layered_users.service.user_service import UserService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the application-wide dependencies."""
    return request.app.state.app_dependencies


def get_user_repository(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[UserRepository]:
    """Get a user repository scoped to the current request.

    An ``HTTPException`` from the endpoint is an ordinary response such as a
    404; it is re-raised outside the unit of work so it is not logged as a
    failed transaction.
    """
    http_error: HTTPException | None = None
    with open_user_repository(app_deps) as repository:
        try:
            yield repository
        except HTTPException as e:
            http_error = e
    if http_error is not None:
        raise http_error


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repository)


def get_user_controller(
    user_service: UserService = Depends(get_user_service),
) -> UserController:
    return UserController(user_service)
