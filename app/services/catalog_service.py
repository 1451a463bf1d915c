# app/services/catalog_service.py
import logging

from sqlmodel import Session

from app.core.description_writer import DescriptionWriter
from app.core.errors import NotAuthorized, NotFound
from app.models.plan import Plan
from app.repositories.plan_repo import PlanRepository
from app.schemas.plan import PlanCreate
from app.schemas.user import UserRead

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Business logic for Plan.

    Responsibilities:
      - only trainers publish, only the owner deletes (checked here,
        never trusted from the caller)
      - snapshot the owner's display name into the plan
      - optional AI description drafting for trainers
    """

    def __init__(
        self,
        repo: PlanRepository,
        writer: DescriptionWriter | None = None,
    ):
        self.repo = repo
        self.writer = writer

    # ----- Reads -----

    def list_all(self, session: Session) -> list[Plan]:
        """All plans, newest first."""
        return self.repo.list_all(session)

    def list_for_owner(self, session: Session, owner_id: str) -> list[Plan]:
        return self.repo.list_by_owner(session, owner_id)

    def find(self, session: Session, plan_id: str) -> Plan | None:
        """Lookup that tolerates absence (deleted plans, dangling ids)."""
        return self.repo.get_by_id(session, plan_id)

    def get(self, session: Session, plan_id: str) -> Plan:
        """
        Raises:
            NotFound: if the plan does not exist.
        """
        plan = self.repo.get_by_id(session, plan_id)
        if plan is None:
            raise NotFound("Plan not found")
        return plan

    # ----- Writes -----

    def create(
        self,
        session: Session,
        owner: UserRead,
        payload: PlanCreate,
    ) -> Plan:
        """
        Publish a new plan owned by `owner`.

        Raises:
            NotAuthorized: if `owner` is not a trainer.
        """
        if owner.role != "trainer":
            logger.warning("Plan creation rejected for non-trainer %s", owner.id)
            raise NotAuthorized("Only trainers can publish plans")

        plan = Plan(
            owner_id=owner.id,
            owner_name=owner.name,
            title=payload.title,
            description=payload.description,
            price=payload.price,
            duration_days=payload.duration_days,
            tags=list(payload.tags),
        )
        plan = self.repo.create(session, plan)
        logger.info("Trainer %s published plan %s", owner.id, plan.id)
        return plan

    def delete(self, session: Session, plan_id: str, requesting_user: UserRead) -> None:
        """
        Delete a plan. Subscriptions and follows are left in place.

        Raises:
            NotFound: if the plan does not exist.
            NotAuthorized: if the requester is not the owner.
        """
        plan = self.get(session, plan_id)
        if plan.owner_id != requesting_user.id:
            logger.warning(
                "User %s tried to delete plan %s owned by %s",
                requesting_user.id,
                plan_id,
                plan.owner_id,
            )
            raise NotAuthorized("Only the owner can delete this plan")

        self.repo.delete(session, plan)
        logger.info("Trainer %s deleted plan %s", requesting_user.id, plan_id)

    # ----- Authoring helpers -----

    def suggest_description(
        self,
        requesting_user: UserRead,
        title: str,
        duration_days: int,
    ) -> str:
        """
        Draft a description via the AI writer, signed with the trainer's name.

        Raises:
            NotAuthorized: requesting_user is not a trainer.

        Writer failures never raise; they come back as fallback text.
        """
        if requesting_user.role != "trainer":
            logger.warning(
                "User %s (role=%s) tried to draft a plan description",
                requesting_user.id,
                requesting_user.role,
            )
            raise NotAuthorized("Only trainers can draft plan descriptions")

        writer = self.writer or DescriptionWriter()
        return writer.generate(title, duration_days, requesting_user.name)
