"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.users import (
    CreateUserRequest,
    LoginResponse,
    LoginUserRequest,
    UpdateUserPasswordRequest,
    UpdateUserRequest,
    UserResponse,
    UsersResponse,
)

__all__ = [
    "CreateUserRequest",
    "HealthResponse",
    "LoginResponse",
    "LoginUserRequest",
    "UpdateUserPasswordRequest",
    "UpdateUserRequest",
    "UserResponse",
    "UsersResponse",
]
