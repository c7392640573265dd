"""Request bodies for users."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Body for creating a user."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    username: str = Field(..., description="Login name.", min_length=1, max_length=60)
    email: str = Field(..., description="Email address.", pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., description="Password.", min_length=1)
    name: str | None = Field(default=None, description="Display name.")
    first_name: str | None = None
    last_name: str | None = None
    nickname: str | None = None
    description: str | None = None
    url: str | None = None
    roles: list[str] | None = Field(default=None, description="Roles, e.g. ['editor'].")


class UpdateUserRequest(BaseModel):
    """Body for updating a user. Only ``id`` is required."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="User ID.", ge=1)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    nickname: str | None = None
    description: str | None = None
    url: str | None = None
    roles: list[str] | None = None
