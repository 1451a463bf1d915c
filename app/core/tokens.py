# app/core/tokens.py
"""
JWT session tokens issued by this backend.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.core.errors import InvalidCredentials


@dataclass
class TokenClaims:
    """Verified claims of an access token."""

    sub: str  # user id
    jti: str  # token id, used for revocation
    exp: datetime


class TokenService:
    """Create and verify signed access tokens (HS256 by default)."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def create_access_token(self, user_id: str, role: str | None = None) -> str:
        """
        Encode a token for `user_id`.

        Claims: sub, jti, iat, exp and optionally role (informational only;
        authorization always re-reads the role from the DB).
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }
        if role:
            payload["role"] = role
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        """
        Verify signature + expiry and return the claims.

        Raises:
            InvalidCredentials: if the token is invalid, expired, or lacks
                sub/jti/exp.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except JWTError:
            raise InvalidCredentials("Invalid or expired token")

        sub = payload.get("sub")
        jti = payload.get("jti")
        exp = payload.get("exp")
        if not sub or not jti or exp is None:
            raise InvalidCredentials("Invalid or expired token")

        return TokenClaims(
            sub=sub,
            jti=jti,
            exp=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
