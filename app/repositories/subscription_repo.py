# app/repositories/subscription_repo.py
from sqlmodel import Session, select

from app.models.subscription import Subscription


class SubscriptionRepository:

    def get(
        self, session: Session, user_id: str, plan_id: str
    ) -> Subscription | None:
        stmt = select(Subscription).where(
            Subscription.user_id == user_id, Subscription.plan_id == plan_id
        )
        return session.exec(stmt).first()

    def list_for_user(self, session: Session, user_id: str) -> list[Subscription]:
        stmt = select(Subscription).where(Subscription.user_id == user_id)
        return list(session.exec(stmt).all())

    def create(self, session: Session, subscription: Subscription) -> Subscription:
        session.add(subscription)
        session.commit()
        session.refresh(subscription)
        return subscription
