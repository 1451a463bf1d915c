# app/models/revoked_token.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class RevokedToken(SQLModel, table=True):
    """
    Access tokens ended by logout.

    Keyed by the token's `jti` claim. `expires_at` mirrors the token's
    own `exp`, after which the row is no longer needed.
    """

    __tablename__ = "revoked_tokens"

    jti: str = Field(primary_key=True)

    user_id: str = Field(index=True)

    expires_at: datetime = Field(
        description="Token expiry (UTC)",
    )

    revoked_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
