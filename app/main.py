# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.core.config import get_settings
from app.core.errors import DomainError
from app.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import user as _user_models  # noqa: F401
from app.models import plan as _plan_models  # noqa: F401
from app.models import subscription as _subscription_models  # noqa: F401
from app.models import follow as _follow_models  # noqa: F401
from app.models import revoked_token as _revoked_token_models  # noqa: F401

# Routers
from app.routers.auth import router as auth_router
from app.routers.plans import router as plans_router
from app.routers.trainers import router as trainers_router
from app.routers.me import router as me_router
from app.seed import seed_demo_data

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
      - Optionally load the demo catalog.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise

    if settings.SEED_DEMO_DATA:
        with Session(engine) as session:
            if seed_demo_data(session):
                logger.info("Startup: demo data loaded.")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME or "FitPlanHub API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    """Render service-level errors as {"detail": ...} with their status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Versioned API prefix, e.g. /api/v1
app.include_router(auth_router, prefix=settings.API_V1_STR)
app.include_router(plans_router, prefix=settings.API_V1_STR)
app.include_router(trainers_router, prefix=settings.API_V1_STR)
app.include_router(me_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "fitplanhub-backend"}
