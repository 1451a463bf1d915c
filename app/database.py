# app/database.py
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Engine
#
# - SQLite (default for local dev): allow use from FastAPI's
#   threadpool (check_same_thread=False). In-memory URLs share a
#   single connection (StaticPool) so every session sees the same DB.
# - Anything else (e.g. Postgres): pool_pre_ping to validate
#   connections before using them.
# ---------------------------------------------------------


def build_engine(db_url: str, echo: bool = False):
    """Create a SQLAlchemy engine suited to the given database URL."""
    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in db_url or db_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(db_url, echo=echo, **kwargs)

    return create_engine(db_url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
