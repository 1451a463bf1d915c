# app/services/identity_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.errors import DuplicateIdentity, InvalidCredentials, NotFound
from app.core.locks import KeyedLock, registration_locks
from app.core.security import PasswordHasher, password_hasher
from app.core.session import SessionContext
from app.core.tokens import TokenService
from app.models.revoked_token import RevokedToken
from app.models.user import User
from app.repositories.revoked_token_repo import RevokedTokenRepository
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserRead, UserRegister

logger = logging.getLogger(__name__)


class IdentityService:
    """
    Registration, credential check and session resolution.

    Responsibilities:
      - enforce email uniqueness (serialized per email)
      - hash secrets; never hand a secret back to callers
      - own the SessionContext (empty at init, cleared by end_session)
      - revoke tokens on logout so they stop resolving
    """

    def __init__(
        self,
        repo: UserRepository,
        tokens: TokenService,
        hasher: PasswordHasher = password_hasher,
        context: SessionContext | None = None,
        locks: KeyedLock = registration_locks,
        revoked_repo: RevokedTokenRepository | None = None,
    ):
        self.repo = repo
        self.tokens = tokens
        self.hasher = hasher
        self.context = context if context is not None else SessionContext()
        self.locks = locks
        self.revoked_repo = revoked_repo or RevokedTokenRepository()

    # ----- Helpers -----

    @staticmethod
    def _public(user: User) -> UserRead:
        """Strip the stored secret: only UserRead leaves this service."""
        return UserRead.model_validate(user)

    def _start_session(self, user: User) -> tuple[UserRead, str]:
        public = self._public(user)
        token = self.tokens.create_access_token(user.id, role=user.role)
        self.context.establish(public, token)
        return public, token

    # ----- Operations -----

    def register(
        self,
        session: Session,
        payload: UserRegister,
    ) -> tuple[UserRead, str]:
        """
        Create an account and sign it in.

        Returns:
            (user, access_token)

        Raises:
            DuplicateIdentity: if the email is already registered. The
                current session is left untouched in that case.
        """
        # hash outside the critical section, it is the slow part
        password_hash = self.hasher.hash(payload.password)

        with self.locks.hold(payload.email):
            if self.repo.get_by_email(session, payload.email) is not None:
                logger.warning("Registration rejected: email already in use")
                raise DuplicateIdentity()

            user = User(
                name=payload.name,
                email=payload.email,
                role=payload.role,
                password_hash=password_hash,
            )
            try:
                user = self.repo.create(session, user)
            except IntegrityError:
                # another process won the race on the unique index
                session.rollback()
                raise DuplicateIdentity()

        logger.info("Registered %s %s", user.role, user.id)
        return self._start_session(user)

    def authenticate(
        self,
        session: Session,
        email: str,
        password: str,
    ) -> tuple[UserRead, str]:
        """
        Check credentials and sign in.

        Raises:
            InvalidCredentials: unknown email or wrong secret (same error
                for both).
        """
        user = self.repo.get_by_email(session, email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Login rejected")
            raise InvalidCredentials()

        return self._start_session(user)

    def resolve_token(self, session: Session, token: str) -> UserRead:
        """
        Resolve a bearer token to its user and bind it to the context.

        Raises:
            InvalidCredentials: bad/expired/revoked token or the user no
                longer exists.
        """
        claims = self.tokens.decode(token)
        if self.revoked_repo.is_revoked(session, claims.jti):
            raise InvalidCredentials("Invalid or expired token")

        user = self.repo.get_by_id(session, claims.sub)
        if user is None:
            raise InvalidCredentials("Invalid or expired token")

        public = self._public(user)
        self.context.establish(public, token)
        return public

    def current_session(self) -> UserRead | None:
        return self.context.user

    def end_session(self, session: Session, token: str | None = None) -> None:
        """
        Sign out: revoke the session token and clear the context.

        Idempotent. Defaults to the token bound to the context. A token
        that is already revoked, expired or malformed cannot authenticate
        anyway, so it is only dropped.
        """
        token = token or self.context.token
        self.context.clear()
        if token is None:
            return

        try:
            claims = self.tokens.decode(token)
        except InvalidCredentials:
            return

        if self.revoked_repo.is_revoked(session, claims.jti):
            return

        try:
            self.revoked_repo.create(
                session,
                RevokedToken(jti=claims.jti, user_id=claims.sub, expires_at=claims.exp),
            )
        except IntegrityError:
            # same token logged out concurrently; already revoked
            session.rollback()
            return

        logger.info("User %s logged out", claims.sub)

    def get_user(self, session: Session, user_id: str) -> UserRead:
        """
        Raises:
            NotFound: if the user does not exist.
        """
        user = self.repo.get_by_id(session, user_id)
        if user is None:
            raise NotFound("User not found")
        return self._public(user)
