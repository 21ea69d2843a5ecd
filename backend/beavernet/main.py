"""BeaverNet API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery); the /api fallback
      goes last so unknown /api paths are still authenticated
    - Global error handlers map BeaverNetError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage and the PayPal client are built in lifespan and live on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory so tests get a fresh app per test module
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beavernet import __version__
from beavernet.api.error_handlers import register_error_handlers
from beavernet.api.routes import (
    animal_control, audit, auth, crm, dispatch, dmv, documents, fallback, health,
    payments, paypal, risk, users,
)
from beavernet.config import Settings, get_settings
from beavernet.infrastructure.observability import log_requests, setup_logging
from beavernet.infrastructure.paypal_client import PayPalClient
from beavernet.storage.factory import build_storage
from beavernet.storage.seed import seed_storage

logger = logging.getLogger(__name__)

ROUTE_MODULES = (
    health, auth, users, dispatch, animal_control, crm, documents,
    payments, paypal, risk, audit, dmv, fallback,
)


def build_paypal_client(settings: Settings) -> PayPalClient | None:
    if not settings.paypal_configured:
        logger.warning("PayPal credentials not configured. PayPal functionality will be disabled.")
        return None
    return PayPalClient(
        settings.paypal_client_id,
        settings.paypal_client_secret,
        environment=settings.paypal_environment,
        timeout_seconds=settings.paypal_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    storage = build_storage(settings)
    await storage.startup()
    await seed_storage(storage, settings)
    app.state.storage = storage
    app.state.paypal = build_paypal_client(settings)
    logger.info("BeaverNet API started")
    yield
    logger.info("BeaverNet API shutting down")
    if app.state.paypal is not None:
        await app.state.paypal.close()
    await storage.shutdown()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="BeaverNet API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    for module in ROUTE_MODULES:
        for router in module.routers:
            app.include_router(router)

    register_error_handlers(app)
    return app


app = create_app()
