"""Request/response schemas for user and login endpoints."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """camelCase on the wire; snake_case also accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request fields are optional so that a missing value reaches the service
# and is rejected there like an empty one.


class CreateUserRequest(_CamelModel):
    """Credentials for a new account."""

    username: str | None = Field(default=None, description="Username (1-255 chars)")
    password: str | None = Field(default=None, description="Password (1-512 chars)")


class UpdateUserRequest(_CamelModel):
    """New username for an existing account."""

    username: str | None = None


class UpdateUserPasswordRequest(_CamelModel):
    """New password for an existing account."""

    password: str | None = None


class LoginUserRequest(_CamelModel):
    """Credentials for login."""

    username: str | None = None
    password: str | None = None


class UserResponse(_CamelModel):
    """Public projection of a user. Never carries the password hash."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: UUID
    username: str


class UsersResponse(_CamelModel):
    """Response for GET /users."""

    users: list[UserResponse]


class LoginResponse(_CamelModel):
    """Signed access token plus the opaque refresh token stored for the user."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
