# app/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Persistent account for FitPlanHub.

    Role:
      - "member" | "trainer"
      - fixed at signup; there is no update path for it.
      - "guest" is represented by the absence of a session.

    `password_hash` never leaves the service layer: every API response
    is built from `UserRead`, which has no secret field.
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login email; compared exactly as stored",
    )

    name: str = Field(
        max_length=100,
        description="Display name shown on plans and profiles",
    )

    role: str = Field(
        default="member",
        index=True,
        description="Application role: member | trainer",
    )

    password_hash: str = Field(
        description="Hashed credential secret",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
