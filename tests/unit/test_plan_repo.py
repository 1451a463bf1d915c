"""
Unit tests for PlanRepository queries.
"""

import pytest

from app.models.plan import Plan
from app.repositories.plan_repo import PlanRepository


@pytest.fixture
def plan_repo() -> PlanRepository:
    return PlanRepository()


def _plan(owner_id: str = "trainer-1", title: str = "Some Plan") -> Plan:
    return Plan(
        owner_id=owner_id,
        owner_name="Sarah",
        title=title,
        description="",
        price=10.0,
        duration_days=7,
    )


class TestPlanRepository:

    def test_list_all_empty(self, db_session, plan_repo):
        assert plan_repo.list_all(db_session) == []

    def test_list_all_newest_first(self, db_session, plan_repo):
        """Test that every plan is returned, most recently created first."""
        first = plan_repo.create(db_session, _plan(title="First"))
        second = plan_repo.create(db_session, _plan(owner_id="trainer-2", title="Second"))

        titles = [p.title for p in plan_repo.list_all(db_session)]

        assert titles == [second.title, first.title]

    def test_list_by_owners(self, db_session, plan_repo):
        plan_repo.create(db_session, _plan(owner_id="trainer-1", title="Mine"))
        plan_repo.create(db_session, _plan(owner_id="trainer-2", title="Theirs"))

        assert plan_repo.list_by_owners(db_session, []) == []
        titles = [p.title for p in plan_repo.list_by_owners(db_session, ["trainer-2"])]
        assert titles == ["Theirs"]

    def test_list_by_ids_skips_missing(self, db_session, plan_repo):
        """Test that ids with no row are left out instead of failing."""
        plan = plan_repo.create(db_session, _plan())
        plan_id = plan.id

        found = plan_repo.list_by_ids(db_session, [plan_id, "missing"])

        assert [p.id for p in found] == [plan_id]
