"""
Unit tests for CatalogService.
"""

import pytest

from app.core.errors import NotAuthorized, NotFound
from app.schemas.plan import PlanCreate


class TestCreatePlan:
    """Tests for publishing plans."""

    def test_trainer_can_create(self, db_session, catalog_service, trainer):
        plan = catalog_service.create(
            db_session,
            trainer,
            PlanCreate(
                title="30-Day HIIT Shred",
                description="Burn fat.",
                price=29.99,
                duration_days=30,
                tags=["hiit", " hiit ", ""],
            ),
        )

        assert plan.id
        assert plan.owner_id == trainer.id
        assert plan.owner_name == "Sarah"
        assert plan.price == 29.99
        assert plan.duration_days == 30
        assert plan.tags == ["hiit"]
        assert plan.created_at is not None

    def test_member_cannot_create(self, db_session, catalog_service, member):
        """Test that the trainer role is checked by the service itself."""
        with pytest.raises(NotAuthorized):
            catalog_service.create(
                db_session,
                member,
                PlanCreate(title="Sneaky Plan", price=0, duration_days=7),
            )

        assert catalog_service.list_all(db_session) == []

    def test_free_plan_allowed(self, make_plan, trainer):
        plan = make_plan(trainer, price=0)

        assert plan.price == 0

    def test_owner_name_is_a_snapshot(self, db_session, make_plan, trainer):
        """Test that the owner's name is copied at creation time."""
        plan = make_plan(trainer)
        renamed = trainer.model_copy(update={"name": "Sarah Renamed"})
        later = make_plan(renamed, title="Second Plan")

        db_session.refresh(plan)
        assert plan.owner_name == "Sarah"
        assert later.owner_name == "Sarah Renamed"


class TestListPlans:
    """Tests for catalog reads."""

    def test_list_all_newest_first(self, db_session, catalog_service, make_plan, trainer):
        first = make_plan(trainer, title="First Plan")
        second = make_plan(trainer, title="Second Plan")
        third = make_plan(trainer, title="Third Plan")

        ids = [p.id for p in catalog_service.list_all(db_session)]

        assert ids == [third.id, second.id, first.id]

    def test_created_at_strictly_increases(self, make_plan, trainer):
        plans = [make_plan(trainer, title=f"Plan {i}") for i in range(5)]

        stamps = [p.created_at for p in plans]
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)

    def test_list_for_owner(self, db_session, catalog_service, make_plan, make_user, trainer):
        other = make_user(name="Mike", role="trainer")
        mine = make_plan(trainer)
        make_plan(other, title="Powerlifting Basics")

        plans = catalog_service.list_for_owner(db_session, trainer.id)

        assert [p.id for p in plans] == [mine.id]

    def test_get_and_find(self, db_session, catalog_service, make_plan, trainer):
        plan = make_plan(trainer)

        assert catalog_service.get(db_session, plan.id).id == plan.id
        assert catalog_service.find(db_session, "missing") is None
        with pytest.raises(NotFound):
            catalog_service.get(db_session, "missing")


class TestDeletePlan:
    """Tests for plan deletion."""

    def test_owner_can_delete(self, db_session, catalog_service, make_plan, trainer):
        plan_id = make_plan(trainer).id

        catalog_service.delete(db_session, plan_id, trainer)

        assert catalog_service.find(db_session, plan_id) is None

    def test_non_owner_cannot_delete(
        self, db_session, catalog_service, make_plan, make_user, trainer
    ):
        other_trainer = make_user(name="Mike", role="trainer")
        plan = make_plan(trainer)

        with pytest.raises(NotAuthorized):
            catalog_service.delete(db_session, plan.id, other_trainer)

        assert catalog_service.find(db_session, plan.id) is not None

    def test_delete_missing_plan(self, db_session, catalog_service, trainer):
        with pytest.raises(NotFound):
            catalog_service.delete(db_session, "missing", trainer)


class TestSuggestDescription:

    def test_delegates_to_writer(self, catalog_service, description_writer, trainer):
        text = catalog_service.suggest_description(trainer, "Core Blast", 14)

        assert text == "Generated description."
        assert description_writer.calls == [("Core Blast", 14, "Sarah")]

    def test_member_cannot_draft(self, catalog_service, description_writer, member):
        """Test that only trainers may use the description assistant."""
        with pytest.raises(NotAuthorized):
            catalog_service.suggest_description(member, "Core Blast", 14)

        assert description_writer.calls == []
