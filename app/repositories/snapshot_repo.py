# app/repositories/snapshot_repo.py
from collections.abc import Iterable
from typing import Any

from sqlmodel import Session, SQLModel, select

from app.models.follow import Follow
from app.models.plan import Plan
from app.models.subscription import Subscription
from app.models.user import User

COLLECTIONS: dict[str, type[SQLModel]] = {
    "users": User,
    "plans": Plan,
    "subscriptions": Subscription,
    "follows": Follow,
}


class SnapshotRepository:
    """
    Whole-collection reads and writes for the four entity collections.

    Used for seeding and bulk import/export. `put_all` replaces a
    collection in one transaction: either every record lands or the
    previous contents are kept.
    """

    @staticmethod
    def _model_for(collection: str) -> type[SQLModel]:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection!r}") from None

    def get_all(self, session: Session, collection: str) -> list[dict[str, Any]]:
        model = self._model_for(collection)
        rows = session.exec(select(model)).all()
        return [row.model_dump() for row in rows]

    def put_all(
        self,
        session: Session,
        collection: str,
        records: Iterable[dict[str, Any]],
    ) -> int:
        """
        Overwrite `collection` with `records`. Returns the new row count.

        Records are validated before the DB is touched; a bad record
        leaves the collection unchanged.
        """
        model = self._model_for(collection)
        rows = [model.model_validate(record) for record in records]

        try:
            for existing in session.exec(select(model)).all():
                session.delete(existing)
            # deletes must hit the DB before re-inserting the same ids
            session.flush()
            session.add_all(rows)
            session.commit()
        except Exception:
            session.rollback()
            raise

        return len(rows)
