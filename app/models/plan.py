# app/models/plan.py
import threading
import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field

_clock_lock = threading.Lock()
_last_created_at: datetime | None = None


def monotonic_utcnow() -> datetime:
    """
    Current UTC time, strictly increasing across calls in this process.

    Two plans created within the same clock tick still get distinct,
    ordered `created_at` values so "newest first" listings are stable.
    """
    global _last_created_at
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_created_at is not None and now <= _last_created_at:
            now = _last_created_at + timedelta(microseconds=1)
        _last_created_at = now
        return now


class Plan(SQLModel, table=True):
    """
    A purchasable fitness plan published by a trainer.

    `owner_name` is a snapshot of the trainer's display name taken at
    creation time. It is not refreshed if the trainer's name changes.
    """

    __tablename__ = "plans"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True,
    )

    owner_id: str = Field(
        index=True,
        description="users.id of the publishing trainer",
    )

    owner_name: str = Field(
        description="Trainer display name at creation time",
    )

    title: str = Field(
        max_length=120,
        index=True,
    )

    description: str = Field(default="")

    price: float = Field(
        ge=0,
        description="One-time price",
    )

    duration_days: int = Field(
        gt=0,
        description="Length of the plan in days",
    )

    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(
        default_factory=monotonic_utcnow,
        index=True,
        description="Creation timestamp (UTC), strictly increasing",
    )
