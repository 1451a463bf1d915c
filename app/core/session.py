# app/core/session.py
from dataclasses import dataclass

from app.schemas.user import UserRead


@dataclass
class SessionContext:
    """
    Who is signed in, held explicitly by `IdentityService`.

    Starts empty; `establish` overwrites it on register/login and
    `clear` empties it on logout. The HTTP layer builds one per request
    from the bearer token, so nothing here is process-global.
    """

    user: UserRead | None = None
    token: str | None = None

    def establish(self, user: UserRead, token: str) -> None:
        self.user = user
        self.token = token

    def clear(self) -> None:
        self.user = None
        self.token = None
