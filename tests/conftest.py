"""
Pytest configuration and shared fixtures for backend tests.
"""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import follow as _follow_models  # noqa: F401
from app.models import plan as _plan_models  # noqa: F401
from app.models import revoked_token as _revoked_token_models  # noqa: F401
from app.models import subscription as _subscription_models  # noqa: F401
from app.models import user as _user_models  # noqa: F401

from app.core.locks import KeyedLock
from app.core.security import PasswordHasher
from app.core.session import SessionContext
from app.core.tokens import TokenService
from app.database import get_session
from app.models.plan import Plan
from app.repositories.follow_repo import FollowRepository
from app.repositories.plan_repo import PlanRepository
from app.repositories.subscription_repo import SubscriptionRepository
from app.repositories.user_repo import UserRepository
from app.schemas.plan import PlanCreate
from app.schemas.user import UserRead, UserRegister
from app.services.access_service import AccessService
from app.services.catalog_service import CatalogService
from app.services.identity_service import IdentityService
from app.services.relationship_service import RelationshipService

# Database URL for testing (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"


class FakeDescriptionWriter:
    """Stands in for the Gemini writer; records calls."""

    def __init__(self, text: str = "Generated description."):
        self.text = text
        self.calls: list[tuple[str, int, str]] = []

    def generate(self, title: str, duration_days: int, trainer_name: str) -> str:
        self.calls.append((title, duration_days, trainer_name))
        return self.text


@pytest.fixture
def db_engine():
    """Create a test database engine."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    with Session(db_engine) as session:
        yield session


# ----- Services -----


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key="test-secret", expire_minutes=5)


@pytest.fixture
def identity_service(token_service) -> IdentityService:
    """IdentityService with a cheap hasher and its own lock registry."""
    return IdentityService(
        UserRepository(),
        token_service,
        hasher=PasswordHasher(rounds=1000),
        context=SessionContext(),
        locks=KeyedLock(),
    )


@pytest.fixture
def description_writer() -> FakeDescriptionWriter:
    return FakeDescriptionWriter()


@pytest.fixture
def catalog_service(description_writer) -> CatalogService:
    return CatalogService(PlanRepository(), writer=description_writer)


@pytest.fixture
def access_service(catalog_service) -> AccessService:
    return AccessService(catalog_service, SubscriptionRepository(), locks=KeyedLock())


@pytest.fixture
def relationship_service() -> RelationshipService:
    return RelationshipService(
        FollowRepository(),
        SubscriptionRepository(),
        PlanRepository(),
        locks=KeyedLock(),
    )


# ----- Factories -----


@pytest.fixture
def make_user(db_session, identity_service) -> Callable[..., UserRead]:
    """Register a user and return the public record."""
    counter = {"n": 0}

    def _make_user(
        name: str = "Test User",
        role: str = "member",
        email: str | None = None,
        password: str = "password123",
    ) -> UserRead:
        counter["n"] += 1
        email = email or f"user{counter['n']}@fitplanhub.com"
        user, _token = identity_service.register(
            db_session,
            UserRegister(name=name, email=email, password=password, role=role),
        )
        return user

    return _make_user


@pytest.fixture
def trainer(make_user) -> UserRead:
    return make_user(name="Sarah", role="trainer", email="sarah@fit.com")


@pytest.fixture
def member(make_user) -> UserRead:
    return make_user(name="John Doe", role="member", email="john@user.com")


@pytest.fixture
def make_plan(db_session, catalog_service) -> Callable[..., Plan]:
    """Publish a plan as `owner`."""

    def _make_plan(
        owner: UserRead,
        title: str = "30-Day HIIT Shred",
        price: float = 29.99,
        duration_days: int = 30,
    ) -> Plan:
        return catalog_service.create(
            db_session,
            owner,
            PlanCreate(
                title=title,
                description="Daily 20-minute routines.",
                price=price,
                duration_days=duration_days,
            ),
        )

    return _make_plan


# ----- HTTP -----


@pytest.fixture
def client(db_engine) -> Generator[TestClient, None, None]:
    """TestClient bound to the in-memory database."""
    from app.main import app

    def override_get_session() -> Generator[Session, None, None]:
        with Session(db_engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
