# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env), all optional for local development:
      - DATABASE_URL (defaults to a local SQLite file)
      - JWT_SECRET (signing secret for session tokens; override in production!)
      - GEMINI_API_KEY (enables AI plan descriptions for trainers)
      - SEED_DEMO_DATA (load the demo trainers/plans on startup)
    """

    PROJECT_NAME: str = "FitPlanHub API"
    API_V1_STR: str = "/api/v1"

    # DB config
    DATABASE_URL: str = "sqlite:///./fitplanhub.db"

    # Session tokens (JWT, signed by this backend)
    JWT_SECRET: str = "dev-secret-change-me"
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Text generation (Gemini). No key => fallback text only.
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TIMEOUT_SECONDS: float = 10.0

    SEED_DEMO_DATA: bool = False

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
