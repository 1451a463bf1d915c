# app/models/follow.py
import uuid

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class Follow(SQLModel, table=True):
    """
    Social edge: follower -> trainer.

    Unique per (follower_id, trainer_id). Not an access grant.
    """

    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("follower_id", "trainer_id", name="uq_follow_pair"),
    )

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
    )

    follower_id: str = Field(index=True)

    trainer_id: str = Field(index=True)
