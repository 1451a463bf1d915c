# app/routers/me.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_auth
from app.database import get_session
from app.routers.deps import relationship_service
from app.schemas.follow import FollowingList
from app.schemas.plan import PlanRead
from app.schemas.user import UserRead

router = APIRouter(prefix="/me", tags=["Me"])


@router.get("/plans", response_model=list[PlanRead])
def my_plans(
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """Plans the current user has purchased."""
    return relationship_service.owned_plans(session, current_user.id)


@router.get("/feed", response_model=list[PlanRead])
def my_feed(
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """
    New from trainers you follow.

    Plans you already own are left out.
    """
    return relationship_service.feed(session, current_user.id)


@router.get("/following", response_model=FollowingList)
def my_following(
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    return FollowingList(
        trainer_ids=relationship_service.followed_trainer_ids(session, current_user.id)
    )
