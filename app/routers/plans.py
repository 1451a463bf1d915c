# app/routers/plans.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import get_current_user, require_auth
from app.database import get_session
from app.routers.deps import access_service, catalog_service
from app.schemas.plan import (
    AccessRead,
    DescriptionRead,
    DescriptionRequest,
    PlanCreate,
    PlanDetail,
    PlanRead,
)
from app.schemas.subscription import SubscriptionRead
from app.schemas.user import UserRead

router = APIRouter(prefix="/plans", tags=["Plans"])


# -------- Public endpoints --------


@router.get("", response_model=list[PlanRead])
def list_plans(session: Session = Depends(get_session)):
    """
    List every plan, newest first.

    - Public endpoint.
    """
    return catalog_service.list_all(session)


@router.get("/{plan_id}", response_model=PlanDetail)
def get_plan(
    plan_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead | None = Depends(get_current_user),
):
    """
    Get a single plan, with `has_access` for the viewer.

    - Guests always get has_access=false.
    """
    plan = catalog_service.get(session, plan_id)
    user_id = current_user.id if current_user else None
    has_access = access_service.grants_access(session, user_id, plan.id)
    return PlanDetail(**PlanRead.model_validate(plan).model_dump(), has_access=has_access)


@router.get("/{plan_id}/access", response_model=AccessRead)
def check_access(
    plan_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead | None = Depends(get_current_user),
):
    """
    Access decision only. Unknown plans answer false, not 404.
    """
    user_id = current_user.id if current_user else None
    return AccessRead(
        plan_id=plan_id,
        has_access=access_service.grants_access(session, user_id, plan_id),
    )


# -------- Authenticated endpoints --------


@router.post("", response_model=PlanRead, status_code=status.HTTP_201_CREATED)
def create_plan(
    payload: PlanCreate,
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """
    Publish a plan as the current user.

    - 403 unless the current user is a trainer.
    """
    return catalog_service.create(session, current_user, payload)


@router.post("/description", response_model=DescriptionRead)
def draft_description(
    payload: DescriptionRequest,
    current_user: UserRead = Depends(require_auth),
):
    """
    Draft a plan description with the AI assistant.

    - 403 unless the current user is a trainer.
    - Writer failures come back as a fallback text, still 200.
    """
    text = catalog_service.suggest_description(
        current_user, payload.title, payload.duration_days
    )
    return DescriptionRead(description=text)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plan(
    plan_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """
    Delete a plan (owner only).

    Existing subscriptions are kept; they simply stop resolving.
    """
    catalog_service.delete(session, plan_id, current_user)
    return None


@router.post(
    "/{plan_id}/purchase",
    response_model=SubscriptionRead,
    status_code=status.HTTP_201_CREATED,
)
def purchase_plan(
    plan_id: str,
    session: Session = Depends(get_session),
    current_user: UserRead = Depends(require_auth),
):
    """
    Buy a plan (instant grant, no payment).

    - 404 if the plan does not exist.
    - 409 if already purchased.
    """
    return access_service.purchase(session, current_user.id, plan_id)
