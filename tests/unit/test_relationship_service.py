"""
Unit tests for RelationshipService: follows, owned plans and feed.
"""

import random

from sqlmodel import select

from app.models.follow import Follow


def _edges(session, follower_id, trainer_id):
    stmt = select(Follow).where(
        Follow.follower_id == follower_id, Follow.trainer_id == trainer_id
    )
    return session.exec(stmt).all()


class TestFollow:
    """Tests for follow edges."""

    def test_follow_and_is_following(self, db_session, relationship_service, trainer, member):
        assert relationship_service.is_following(db_session, member.id, trainer.id) is False

        relationship_service.follow(db_session, member.id, trainer.id)

        assert relationship_service.is_following(db_session, member.id, trainer.id) is True
        # direction matters
        assert relationship_service.is_following(db_session, trainer.id, member.id) is False

    def test_follow_is_idempotent(self, db_session, relationship_service, trainer, member):
        relationship_service.follow(db_session, member.id, trainer.id)
        relationship_service.follow(db_session, member.id, trainer.id)

        assert len(_edges(db_session, member.id, trainer.id)) == 1

    def test_follow_unfollow_follow_leaves_one_edge(
        self, db_session, relationship_service, trainer, member
    ):
        relationship_service.follow(db_session, member.id, trainer.id)
        relationship_service.unfollow(db_session, member.id, trainer.id)
        relationship_service.follow(db_session, member.id, trainer.id)

        assert len(_edges(db_session, member.id, trainer.id)) == 1

    def test_unfollow_without_edge_is_noop(self, db_session, relationship_service, trainer, member):
        relationship_service.unfollow(db_session, member.id, trainer.id)
        relationship_service.unfollow(db_session, member.id, trainer.id)

        assert relationship_service.is_following(db_session, member.id, trainer.id) is False

    def test_follow_does_not_check_role(self, db_session, relationship_service, make_user, member):
        """Test that following a non-trainer is allowed."""
        friend = make_user(name="Friend")

        relationship_service.follow(db_session, member.id, friend.id)

        assert relationship_service.is_following(db_session, member.id, friend.id) is True

    def test_followed_trainer_ids(self, db_session, relationship_service, make_user, member):
        t1 = make_user(name="T1", role="trainer")
        t2 = make_user(name="T2", role="trainer")
        relationship_service.follow(db_session, member.id, t1.id)
        relationship_service.follow(db_session, member.id, t2.id)

        ids = relationship_service.followed_trainer_ids(db_session, member.id)

        assert sorted(ids) == sorted([t1.id, t2.id])


class TestOwnedPlans:

    def test_owned_plans_lists_purchases(
        self, db_session, relationship_service, access_service, make_plan, trainer, member
    ):
        plan = make_plan(trainer)
        make_plan(trainer, title="Not Bought")

        access_service.purchase(db_session, member.id, plan.id)

        assert [p.id for p in relationship_service.owned_plans(db_session, member.id)] == [plan.id]

    def test_owned_plans_skips_deleted(
        self,
        db_session,
        relationship_service,
        access_service,
        catalog_service,
        make_plan,
        trainer,
        member,
    ):
        """Test that a subscription to a deleted plan is silently dropped."""
        plan = make_plan(trainer)
        kept = make_plan(trainer, title="Kept Plan")
        access_service.purchase(db_session, member.id, plan.id)
        access_service.purchase(db_session, member.id, kept.id)

        catalog_service.delete(db_session, plan.id, trainer)

        assert [p.id for p in relationship_service.owned_plans(db_session, member.id)] == [kept.id]

    def test_owned_plans_empty(self, db_session, relationship_service, member):
        assert relationship_service.owned_plans(db_session, member.id) == []


class TestFeed:
    """Tests for the personalized feed."""

    def test_feed_shows_followed_trainer_plans(
        self, db_session, relationship_service, make_plan, make_user, trainer, member
    ):
        other = make_user(name="Mike", role="trainer")
        plan = make_plan(trainer)
        make_plan(other, title="Powerlifting Basics")

        relationship_service.follow(db_session, member.id, trainer.id)

        assert [p.id for p in relationship_service.feed(db_session, member.id)] == [plan.id]

    def test_feed_empty_without_follows(self, db_session, relationship_service, make_plan, trainer, member):
        make_plan(trainer)

        assert relationship_service.feed(db_session, member.id) == []

    def test_feed_excludes_owned(
        self, db_session, relationship_service, access_service, make_plan, trainer, member
    ):
        """Test that buying a followed trainer's plan removes it from the feed."""
        plan = make_plan(trainer)
        other_plan = make_plan(trainer, title="Second Plan")
        relationship_service.follow(db_session, member.id, trainer.id)

        access_service.purchase(db_session, member.id, plan.id)

        assert [p.id for p in relationship_service.feed(db_session, member.id)] == [other_plan.id]

    def test_feed_after_unfollow(self, db_session, relationship_service, make_plan, trainer, member):
        make_plan(trainer)
        relationship_service.follow(db_session, member.id, trainer.id)
        relationship_service.unfollow(db_session, member.id, trainer.id)

        assert relationship_service.feed(db_session, member.id) == []

    def test_feed_never_overlaps_owned_plans(
        self, db_session, relationship_service, access_service, make_plan, make_user, member
    ):
        """Test the feed/owned disjointness over a random operation sequence."""
        rng = random.Random(1234)
        trainers = [make_user(name=f"Trainer {i}", role="trainer") for i in range(3)]
        plans = [make_plan(t, title=f"Plan {i}-{j}") for i, t in enumerate(trainers) for j in range(3)]

        for _ in range(40):
            action = rng.choice(["follow", "unfollow", "purchase"])
            if action == "purchase":
                plan = rng.choice(plans)
                if not access_service.grants_access(db_session, member.id, plan.id):
                    access_service.purchase(db_session, member.id, plan.id)
            else:
                trainer = rng.choice(trainers)
                getattr(relationship_service, action)(db_session, member.id, trainer.id)

            owned = {p.id for p in relationship_service.owned_plans(db_session, member.id)}
            feed = {p.id for p in relationship_service.feed(db_session, member.id)}
            assert owned.isdisjoint(feed)
