# app/repositories/plan_repo.py
from collections.abc import Iterable

from sqlmodel import Session, select

from app.models.plan import Plan


class PlanRepository:
    """
    Data access layer for Plan.

    - Pure DB operations (CRUD + queries).
    - Listings are newest first (created_at desc).
    """

    def get_by_id(self, session: Session, plan_id: str) -> Plan | None:
        return session.get(Plan, plan_id)

    def list_all(self, session: Session) -> list[Plan]:
        stmt = select(Plan).order_by(Plan.created_at.desc())
        return list(session.exec(stmt).all())

    def list_by_owner(self, session: Session, owner_id: str) -> list[Plan]:
        stmt = (
            select(Plan)
            .where(Plan.owner_id == owner_id)
            .order_by(Plan.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def list_by_owners(self, session: Session, owner_ids: Iterable[str]) -> list[Plan]:
        owner_ids = list(owner_ids)
        if not owner_ids:
            return []
        stmt = (
            select(Plan)
            .where(Plan.owner_id.in_(owner_ids))
            .order_by(Plan.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def list_by_ids(self, session: Session, plan_ids: Iterable[str]) -> list[Plan]:
        """Plans for the given ids; ids with no row are simply absent."""
        plan_ids = list(plan_ids)
        if not plan_ids:
            return []
        stmt = (
            select(Plan)
            .where(Plan.id.in_(plan_ids))
            .order_by(Plan.created_at.desc())
        )
        return list(session.exec(stmt).all())

    def create(self, session: Session, plan: Plan) -> Plan:
        session.add(plan)
        session.commit()
        session.refresh(plan)
        return plan

    def delete(self, session: Session, plan: Plan) -> None:
        session.delete(plan)
        session.commit()
