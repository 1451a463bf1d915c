# app/schemas/follow.py
from sqlmodel import SQLModel

from app.schemas.plan import PlanRead
from app.schemas.user import TrainerPublic


class FollowStatus(SQLModel):
    trainer_id: str
    is_following: bool


class FollowingList(SQLModel):
    trainer_ids: list[str]


class TrainerProfile(SQLModel):
    """
    Public trainer page: who they are, what they publish,
    and whether the viewer follows them (False for guests).
    """

    trainer: TrainerPublic
    plans: list[PlanRead]
    is_following: bool
