"""User Pydantic schemas for request/response validation."""

from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    """Base user schema."""

    email: str
    name: str | None = None


class UserCreate(UserBase):
    """Schema for registering a new user."""

    password: str


class UserResponse(UserBase):
    """Public user record. Never carries the password."""

    id: int

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Result of a successful register or login.

    ``token`` is a fixed placeholder, not a session credential.
    """

    user: UserResponse
    token: str
    message: str
