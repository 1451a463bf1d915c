# app/repositories/revoked_token_repo.py
from sqlmodel import Session

from app.models.revoked_token import RevokedToken


class RevokedTokenRepository:

    def is_revoked(self, session: Session, jti: str) -> bool:
        return session.get(RevokedToken, jti) is not None

    def create(self, session: Session, revoked: RevokedToken) -> RevokedToken:
        session.add(revoked)
        session.commit()
        session.refresh(revoked)
        return revoked
