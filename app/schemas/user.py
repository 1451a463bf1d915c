# app/schemas/user.py
from datetime import datetime
from typing import Literal

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel, Field

# App-level roles. "guest" = no session, so we don't store it here.
Role = Literal["member", "trainer"]


class UserBase(SQLModel):
    """
    Shared fields for read models.

    Validation rules:
      - email must be a valid EmailStr
      - name cannot be empty or whitespace
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    name: str = Field(max_length=100)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class UserRegister(UserBase):
    """
    Signup payload.

    `role` is chosen once here and cannot be changed afterwards.
    """

    password: str = Field(min_length=6, max_length=128)
    role: Role = "member"


class UserLogin(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class UserRead(UserBase):
    """Response schema returned to clients. Never carries the secret."""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    id: str
    role: Role
    created_at: datetime


class TrainerPublic(SQLModel):
    """What anyone can see about a trainer (no email)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    role: Role


class AuthResponse(SQLModel):
    """Returned by register/login: the session token plus the user."""

    access_token: str
    token_type: str = "bearer"
    user: UserRead
