# app/seed.py
"""
Demo catalog for local development (SEED_DEMO_DATA=true).

Only applied to an empty database (no users, no plans), so restarts
never clobber real data.
"""

import logging
from datetime import datetime, timedelta, timezone

from sqlmodel import Session

from app.core.security import password_hasher
from app.repositories.snapshot_repo import SnapshotRepository

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"


def demo_collections(now: datetime | None = None) -> dict[str, list[dict]]:
    """Users and plans for the demo, keyed by collection name."""
    now = now or datetime.now(timezone.utc)
    password_hash = password_hasher.hash(DEMO_PASSWORD)

    users = [
        {
            "id": "trainer-1",
            "name": "Sarah Fit",
            "email": "sarah@fit.com",
            "role": "trainer",
            "password_hash": password_hash,
        },
        {
            "id": "trainer-2",
            "name": "Mike Iron",
            "email": "mike@fit.com",
            "role": "trainer",
            "password_hash": password_hash,
        },
        {
            "id": "user-1",
            "name": "John Doe",
            "email": "john@user.com",
            "role": "member",
            "password_hash": password_hash,
        },
    ]
    plans = [
        {
            "id": "plan-1",
            "owner_id": "trainer-1",
            "owner_name": "Sarah Fit",
            "title": "30-Day HIIT Shred",
            "description": (
                "A high-intensity interval training program designed to burn "
                "fat and build lean muscle. Includes daily 20-minute routines "
                "requiring no equipment."
            ),
            "price": 29.99,
            "duration_days": 30,
            "tags": ["hiit", "fat-loss"],
            "created_at": now,
        },
        {
            "id": "plan-2",
            "owner_id": "trainer-2",
            "owner_name": "Mike Iron",
            "title": "Powerlifting Basics",
            "description": (
                "Master the big three: Squat, Bench, and Deadlift. This 8-week "
                "program focuses on progressive overload for beginners."
            ),
            "price": 49.99,
            "duration_days": 60,
            "tags": ["strength"],
            "created_at": now - timedelta(hours=3),
        },
    ]
    return {"users": users, "plans": plans}


def seed_demo_data(session: Session, repo: SnapshotRepository | None = None) -> bool:
    """
    Load the demo users/plans into an empty database.

    Returns True if data was written.
    """
    repo = repo or SnapshotRepository()
    if repo.get_all(session, "users") or repo.get_all(session, "plans"):
        return False

    for collection, records in demo_collections().items():
        count = repo.put_all(session, collection, records)
        logger.info("Seeded %d %s", count, collection)
    return True
