# app/models/subscription.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class Subscription(SQLModel, table=True):
    """
    A user's purchase of a plan.

    One user cannot have 2 rows for the same plan.
    `plan_id` is intentionally not a foreign key: deleting a plan leaves
    its subscriptions behind, and readers skip the dangling ones.
    """

    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_id", name="uq_subscription_user_plan"),
    )

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
    )

    user_id: str = Field(index=True)

    plan_id: str = Field(index=True)

    purchased_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
