# app/repositories/follow_repo.py
from sqlmodel import Session, select

from app.models.follow import Follow


class FollowRepository:

    def get(self, session: Session, follower_id: str, trainer_id: str) -> Follow | None:
        stmt = select(Follow).where(
            Follow.follower_id == follower_id, Follow.trainer_id == trainer_id
        )
        return session.exec(stmt).first()

    def list_trainer_ids(self, session: Session, follower_id: str) -> list[str]:
        stmt = select(Follow.trainer_id).where(Follow.follower_id == follower_id)
        return list(session.exec(stmt).all())

    def create(self, session: Session, follow: Follow) -> Follow:
        session.add(follow)
        session.commit()
        session.refresh(follow)
        return follow

    def delete_pair(self, session: Session, follower_id: str, trainer_id: str) -> int:
        """Delete every edge for the pair. Returns the number removed."""
        rows = session.exec(
            select(Follow).where(
                Follow.follower_id == follower_id, Follow.trainer_id == trainer_id
            )
        ).all()
        for row in rows:
            session.delete(row)
        session.commit()
        return len(rows)
