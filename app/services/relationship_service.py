# app/services/relationship_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.locks import KeyedLock, follow_locks
from app.models.follow import Follow
from app.models.plan import Plan
from app.repositories.follow_repo import FollowRepository
from app.repositories.plan_repo import PlanRepository
from app.repositories.subscription_repo import SubscriptionRepository

logger = logging.getLogger(__name__)


class RelationshipService:
    """
    Follow edges and the per-user plan views derived from them.

    Responsibilities:
      - idempotent follow/unfollow (no role check: a follow is a
        social edge, not an access grant)
      - owned plans: resolved from subscriptions, dangling ones skipped
      - feed: followed trainers' plans minus owned plans, recomputed
        on every call
    """

    def __init__(
        self,
        follow_repo: FollowRepository,
        sub_repo: SubscriptionRepository,
        plan_repo: PlanRepository,
        locks: KeyedLock = follow_locks,
    ):
        self.follow_repo = follow_repo
        self.sub_repo = sub_repo
        self.plan_repo = plan_repo
        self.locks = locks

    # ----- Follow edges -----

    def follow(self, session: Session, follower_id: str, trainer_id: str) -> None:
        """Create the edge if missing. Existing edge => no-op."""
        with self.locks.hold((follower_id, trainer_id)):
            if self.follow_repo.get(session, follower_id, trainer_id) is not None:
                return
            try:
                self.follow_repo.create(
                    session,
                    Follow(follower_id=follower_id, trainer_id=trainer_id),
                )
            except IntegrityError:
                # concurrent writer already created it; same outcome
                session.rollback()
                return

        logger.info("User %s followed %s", follower_id, trainer_id)

    def unfollow(self, session: Session, follower_id: str, trainer_id: str) -> None:
        """Remove the edge if present. Missing edge => no-op."""
        with self.locks.hold((follower_id, trainer_id)):
            removed = self.follow_repo.delete_pair(session, follower_id, trainer_id)

        if removed:
            logger.info("User %s unfollowed %s", follower_id, trainer_id)

    def is_following(self, session: Session, follower_id: str, trainer_id: str) -> bool:
        return self.follow_repo.get(session, follower_id, trainer_id) is not None

    def followed_trainer_ids(self, session: Session, user_id: str) -> list[str]:
        return self.follow_repo.list_trainer_ids(session, user_id)

    # ----- Derived views -----

    def owned_plans(self, session: Session, user_id: str) -> list[Plan]:
        """Plans the user purchased that still exist, newest first."""
        plan_ids = {s.plan_id for s in self.sub_repo.list_for_user(session, user_id)}
        return self.plan_repo.list_by_ids(session, plan_ids)

    def feed(self, session: Session, user_id: str) -> list[Plan]:
        """
        Plans from trainers the user follows, excluding ones they own.

        Exclusion is by plan id, so a purchase is reflected on the very
        next call.
        """
        trainer_ids = self.followed_trainer_ids(session, user_id)
        if not trainer_ids:
            return []

        owned_ids = {p.id for p in self.owned_plans(session, user_id)}
        return [
            plan
            for plan in self.plan_repo.list_by_owners(session, trainer_ids)
            if plan.id not in owned_ids
        ]
