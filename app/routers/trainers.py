# app/routers/trainers.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import get_current_user, get_identity_service, require_auth
from app.database import get_session
from app.routers.deps import catalog_service, relationship_service
from app.schemas.follow import FollowStatus, TrainerProfile
from app.schemas.plan import PlanRead
from app.schemas.user import TrainerPublic, UserRead
from app.services.identity_service import IdentityService

router = APIRouter(prefix="/trainers", tags=["Trainers"])


@router.get("/{trainer_id}", response_model=TrainerProfile)
def get_trainer_profile(
    trainer_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead | None = Depends(get_current_user),
    identity: IdentityService = Depends(get_identity_service),
):
    """
    Public trainer page: profile, published plans, follow state.
    """
    trainer = identity.get_user(session, trainer_id)
    plans = catalog_service.list_for_owner(session, trainer_id)
    following = (
        relationship_service.is_following(session, current_user.id, trainer_id)
        if current_user
        else False
    )
    return TrainerProfile(
        trainer=TrainerPublic.model_validate(trainer),
        plans=[PlanRead.model_validate(p) for p in plans],
        is_following=following,
    )


@router.post("/{trainer_id}/follow", response_model=FollowStatus)
def follow_trainer(
    trainer_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """Follow a trainer. Repeating it is harmless."""
    relationship_service.follow(session, current_user.id, trainer_id)
    return FollowStatus(trainer_id=trainer_id, is_following=True)


@router.delete("/{trainer_id}/follow", response_model=FollowStatus)
def unfollow_trainer(
    trainer_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """Unfollow a trainer. Not following is not an error."""
    relationship_service.unfollow(session, current_user.id, trainer_id)
    return FollowStatus(trainer_id=trainer_id, is_following=False)
