"""FastAPI application factory.

All API endpoints are versioned under the /api/v1/ prefix. The health
check stays unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tillbook.infrastructure.persistence.sqlalchemy import create_tables
from tillbook.presentation.api.dependencies import get_engine
from tillbook.presentation.api.exception_handlers import setup_exception_handlers
from tillbook.presentation.api.routers import (
    access_router,
    admin_router,
    agreements_router,
    assets_router,
    auth_router,
    invoices_router,
    onboarding_router,
    plaid_router,
    team_router,
    transactions_router,
)
from tillbook_config.settings import Settings, get_settings

NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "urllib3",
    "sqlalchemy.engine",
    "aiosqlite",
    "plaid",
)


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Console logging; tillbook loggers follow ``log_level``, libraries stay at WARNING."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("tillbook", "tillbook_auth", "tillbook_config"):
        logging.getLogger(name).setLevel(log_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and session management.

- Passwords are hashed with bcrypt
- JWT access tokens, refresh token in an HttpOnly cookie
- Account lockout after repeated failed logins
- `redirect_to` tells the client where to go after signing in
""",
    },
    {
        "name": "Access",
        "description": "Route guard decisions for the browser client.",
    },
    {
        "name": "Onboarding",
        "description": """Business questionnaire every new tenant completes.

Progress is derived from existing data: company profile, bank connection
and transactions.
""",
    },
    {
        "name": "Plaid",
        "description": """Bank connections through the Plaid aggregator.

**Flow:**
1. `POST /link-token` and open Plaid Link in the browser
2. `POST /exchange-token` with the resulting public token
3. `GET /accounts`, `GET /transactions` for live data
4. `POST /sync` imports transactions into the ledger
""",
    },
    {
        "name": "Transactions",
        "description": "The tenant's ledger of expense transactions.",
    },
    {
        "name": "Invoices",
        "description": "Invoices sent to clients. Numbers default to `INV-<epoch ms>`.",
    },
    {
        "name": "Assets",
        "description": "Branding, legal and financial documents kept on file.",
    },
    {
        "name": "Agreements",
        "description": "Client agreements with scope of work, value and term.",
    },
    {
        "name": "Team",
        "description": "Internal staff directory, visible to team members only.",
    },
    {
        "name": "Admin",
        "description": "Cross-tenant statistics and user management.",
    },
    {"name": "Health", "description": "Service health monitoring endpoints."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting Tillbook API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down Tillbook API...")
    await engine.dispose()


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(access_router, prefix="/access", tags=["Access"])
    v1_router.include_router(
        onboarding_router,
        prefix="/onboarding",
        tags=["Onboarding"],
    )
    v1_router.include_router(plaid_router, prefix="/plaid", tags=["Plaid"])
    v1_router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    v1_router.include_router(invoices_router, prefix="/invoices", tags=["Invoices"])
    v1_router.include_router(assets_router, prefix="/assets", tags=["Assets"])
    v1_router.include_router(
        agreements_router,
        prefix="/agreements",
        tags=["Agreements"],
    )
    v1_router.include_router(team_router, prefix="/team", tags=["Team"])
    v1_router.include_router(admin_router, tags=["Admin"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Multi-tenant bookkeeping backend with **bank connections** "
            "through Plaid and an **onboarding-gated** ledger."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app


# Application instance for uvicorn
app = create_app()
