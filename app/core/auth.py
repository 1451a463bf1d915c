# app/core/auth.py
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.config import get_settings
from app.core.session import SessionContext
from app.core.tokens import TokenService
from app.database import get_session
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserRead
from app.services.identity_service import IdentityService

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so we can support "guest" mode (unauthenticated).
bearer_scheme = HTTPBearer(auto_error=False)

token_service = TokenService(
    secret_key=settings.JWT_SECRET,
    algorithm=settings.JWT_ALG,
    expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
)

user_repo = UserRepository()


def get_identity_service() -> IdentityService:
    """
    A fresh IdentityService per request, with an empty SessionContext.

    The context is filled from the bearer token (get_current_user) or by
    register/login within the same request.
    """
    return IdentityService(user_repo, token_service, context=SessionContext())


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
    identity: IdentityService = Depends(get_identity_service),
) -> UserRead | None:
    """
    Resolve the current user from our JWT.

    Flow:
      1. If no Authorization header => guest => return None.
      2. Decode JWT => 'sub' => load user.
      3. Bind the user to the request's SessionContext.

    Raises:
        InvalidCredentials (401): if the token is invalid/expired or the
            user is gone.
    """
    if credentials is None:
        return None  # guest mode

    return identity.resolve_token(session, credentials.credentials)


def require_auth(user: UserRead | None = Depends(get_current_user)) -> UserRead:
    """
    Enforce authentication.

    Role/ownership rules are enforced by the services themselves.

    Raises:
        HTTPException(401): if user is None.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user
