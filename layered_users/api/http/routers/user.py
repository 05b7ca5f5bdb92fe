"""User API router, mounted at ``/user``."""

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from pydantic import BaseModel, Field

from layered_users.api.http.deps import get_user_controller
from layered_users.controller.user_controller import UserController
from layered_users.domain.user import User
from layered_users.runtime.db import MAX_ROW_ID

router = APIRouter(prefix="/user", tags=["user"])


class UserCreate(BaseModel):
    """Request body for creating a user."""

    username: str = Field(description="User's login name")
    email: str = Field(description="User's email address")


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    controller: UserController = Depends(get_user_controller),
) -> User:
    """Create a new user."""
    return controller.create_user(payload.username, payload.email)


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="User ID"),
    controller: UserController = Depends(get_user_controller),
) -> User:
    """Get a user by ID."""
    user = controller.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/", response_model=list[User])
def list_users(
    controller: UserController = Depends(get_user_controller),
) -> list[User]:
    """List all users."""
    return controller.get_all_users()


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(
    user_id: int = Path(..., ge=1, le=MAX_ROW_ID, description="User ID"),
    controller: UserController = Depends(get_user_controller),
) -> Response:
    """Delete a user. Deleting an unknown id succeeds as well."""
    controller.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
