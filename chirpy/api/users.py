"""User registration and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from chirpy.api.dependencies import get_user_service
from chirpy.schemas.errors import ErrorResponse
from chirpy.schemas.user import UserCreate, UserLogin, UserResponse
from chirpy.services.users import UserService

router = APIRouter(prefix="/api", tags=["users"])


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_user(
    user_data: UserCreate,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    return users.register(user_data.email, user_data.password)


@router.post(
    "/login",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    credentials: UserLogin,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Login with email and password."""
    return users.authenticate(credentials.email, credentials.password)
