# app/services/access_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.errors import AlreadySubscribed
from app.core.locks import KeyedLock, subscription_locks
from app.models.subscription import Subscription
from app.repositories.subscription_repo import SubscriptionRepository
from app.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)


class AccessService:
    """
    Decides who may open a plan's protected content, and grants access
    through purchases.

    Decision order for grants_access (first match wins):
      1. plan missing        -> deny (fail-closed)
      2. user owns the plan  -> allow
      3. user subscribed     -> allow
      4. otherwise           -> deny
    """

    def __init__(
        self,
        catalog: CatalogService,
        sub_repo: SubscriptionRepository,
        locks: KeyedLock = subscription_locks,
    ):
        self.catalog = catalog
        self.sub_repo = sub_repo
        self.locks = locks

    def grants_access(
        self,
        session: Session,
        user_id: str | None,
        plan_id: str,
    ) -> bool:
        """Pure read; safe to call repeatedly and concurrently."""
        plan = self.catalog.find(session, plan_id)
        if plan is None:
            return False

        if user_id is None:
            return False

        if plan.owner_id == user_id:
            return True

        return self.sub_repo.get(session, user_id, plan_id) is not None

    def purchase(self, session: Session, user_id: str, plan_id: str) -> Subscription:
        """
        Grant `user_id` access to `plan_id` (no payment is processed).

        The duplicate check and the insert form one critical section
        keyed by (user_id, plan_id).

        Raises:
            NotFound: if the plan does not exist.
            AlreadySubscribed: if the user already holds this plan.
        """
        self.catalog.get(session, plan_id)

        with self.locks.hold((user_id, plan_id)):
            if self.sub_repo.get(session, user_id, plan_id) is not None:
                raise AlreadySubscribed()

            try:
                subscription = self.sub_repo.create(
                    session,
                    Subscription(user_id=user_id, plan_id=plan_id),
                )
            except IntegrityError:
                # lost the race on the unique constraint
                session.rollback()
                raise AlreadySubscribed()

        logger.info("User %s purchased plan %s", user_id, plan_id)
        return subscription
