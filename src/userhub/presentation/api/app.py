"""Builds the userhub ASGI application.

Routes live under ``/api/v1``; ``/health`` sits outside the versioned
prefix so probes keep working across API versions.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userhub import __version__
from userhub.config import Settings, get_settings
from userhub.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    display_url,
)
from userhub.presentation.api.exception_handlers import setup_exception_handlers
from userhub.presentation.api.routers import users_router
from userhub.presentation.api.schemas import HealthResponse

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User account management.

**Rules:**
- Email must be unique across all users
- Password must be at least 8 characters
- Passwords are never returned in responses
""",
    },
    {
        "name": "Health",
        "description": "Liveness probe.",
    },
]

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Set up stdout logging for the service.

    - One line per record: time, level, logger, message
    - userhub loggers follow LOG_LEVEL
    - Driver and HTTP client loggers are held at WARNING
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Replace handlers installed by uvicorn or pytest
    )

    logging.getLogger("userhub").setLevel(log_level)

    # Drivers log every statement at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the schema on startup, release the pool on shutdown."""
    settings: Settings = app.state.settings
    engine = app.state.engine

    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    logger.info("Database: %s", display_url(settings.database_url))
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Database unreachable at %s", display_url(settings.database_url))
        raise SystemExit(1) from None

    yield

    # Shutdown
    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a FastAPI app bound to one settings object.

    Parameters
    ----------
    settings
        Optional settings override for testing. Defaults to the
        environment-derived settings.

    Returns
    -------
    The application, with engine and session maker on ``app.state``.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User account management over a relational store.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Shared per-app resources; sessions are opened per request
    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Unversioned
    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Liveness probe for load balancers and monitoring."""
        return HealthResponse(status="ok")

    return app
