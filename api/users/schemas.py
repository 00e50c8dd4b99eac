"""
User API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

ROLES: tuple[str, ...] = ("student", "moderator", "admin")
DEFAULT_ROLE = "student"


class SaveUserRequest(BaseModel):
    # Optional so a missing email yields the 400 the login flow expects.
    email: str | None = Field(default=None, max_length=320)
    name: str | None = Field(default=None, max_length=200)
    photoURL: str | None = Field(default=None, max_length=2000)


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    photoURL: str | None = Field(default=None, max_length=2000)


class UpdateRoleRequest(BaseModel):
    role: str = Field(..., min_length=1, max_length=20)
