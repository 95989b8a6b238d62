"""User CRUD and login endpoints. Domain errors are mapped in exception_handlers."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_token_issuer, get_user_service
from app.schemas.users import (
    CreateUserRequest,
    LoginResponse,
    LoginUserRequest,
    UpdateUserPasswordRequest,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)
from app.services.tokens import TokenIssuer
from app.services.users import UserService

router = APIRouter()

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.post("", response_model=UserResponse)
def create_user(body: CreateUserRequest, service: UserServiceDep) -> UserResponse:
    """Create an account; 400 on invalid input or a taken username."""
    return service.create_user(body.username, body.password)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginUserRequest,
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT access token and a refresh token.
    Include the access token in the Authorization header as: Bearer <accessToken>
    """
    return issuer.login(body.username, body.password)


@router.get("", response_model=UsersResponse)
def list_users(service: UserServiceDep) -> UsersResponse:
    return service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, service: UserServiceDep) -> UserResponse:
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UUID, body: UpdateUserRequest, service: UserServiceDep
) -> UserResponse:
    return service.update_username(user_id, body.username)


@router.put("/{user_id}/password")
def update_user_password(
    user_id: UUID, body: UpdateUserPasswordRequest, service: UserServiceDep
) -> Response:
    service.update_password(user_id, body.password)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{user_id}")
def delete_user(user_id: UUID, service: UserServiceDep) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_200_OK)
