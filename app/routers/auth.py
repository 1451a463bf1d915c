# app/routers/auth.py
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.auth import bearer_scheme, get_identity_service, require_auth
from app.database import get_session
from app.schemas.user import AuthResponse, UserLogin, UserRead, UserRegister
from app.services.identity_service import IdentityService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: UserRegister,
    session: Session = Depends(get_session),
    identity: IdentityService = Depends(get_identity_service),
):
    """
    Sign up as a member or a trainer and receive a session token.

    - 409 if the email is already registered.
    """
    user, token = identity.register(session, payload)
    return AuthResponse(access_token=token, user=user)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: UserLogin,
    session: Session = Depends(get_session),
    identity: IdentityService = Depends(get_identity_service),
):
    """
    Exchange email + password for a session token.

    - 401 with a generic message on any mismatch.
    """
    user, token = identity.authenticate(session, payload.email, payload.password)
    return AuthResponse(access_token=token, user=user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
    identity: IdentityService = Depends(get_identity_service),
):
    """
    End the session. Always succeeds.

    The bearer token, if any, is revoked: it no longer resolves to a user.
    Missing, expired or already revoked tokens are accepted silently.
    """
    token = credentials.credentials if credentials else None
    identity.end_session(session, token)
    return None


@router.get("/me", response_model=UserRead)
def read_me(
    current_user: UserRead = Depends(require_auth),
    identity: IdentityService = Depends(get_identity_service),
):
    """
    Return the authenticated user's profile.

    Auth:
      - Requires a valid bearer token.
    """
    return identity.current_session() or current_user
