"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, UTC
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from salonbook.api.errors import register_error_handlers
from salonbook.api.routes import ROUTERS
from salonbook.config import Settings
from salonbook.database.base import Database
from salonbook.database.errors import StoreError
from salonbook.database.factories import create_database

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(db: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create the API application.

    Args:
        db: Database to serve from. If None, one is created from settings.
        settings: Settings. If None, settings are read from the environment.

    Returns:
        FastAPI application with all routers and error handlers installed
    """
    if settings is None:
        settings = Settings.from_env()
    if db is None:
        db = create_database(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting salonbook API (environment: %s)", settings.environment)
        try:
            app.state.db.connect()
        except StoreError as e:
            logger.error("Database connection check failed: %s", e)
        yield
        logger.info("Shutting down salonbook API")
        app.state.db.disconnect()

    app = FastAPI(title="salonbook", version=API_VERSION, lifespan=lifespan)
    app.state.db = db
    app.state.settings = settings

    app.add_middleware(GZipMiddleware)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    register_error_handlers(app, settings)

    for router, tag in ROUTERS:
        app.include_router(router, prefix="/api", tags=[tag])

    @app.get("/health")
    def health():
        return {
            "status": "OK",
            "timestamp": datetime.now(UTC).isoformat(),
            "environment": settings.environment,
            "pool": app.state.db.pool_status(),
        }

    @app.get("/")
    def root():
        return {
            "message": "salonbook API",
            "version": API_VERSION,
            "endpoints": {
                "health": "/health",
                "api": {
                    "services": "/api/services",
                    "staff": "/api/staff",
                    "customers": "/api/customers",
                    "records": "/api/records",
                    "expenses": "/api/expenses",
                    "expenseTypes": "/api/expense-types",
                    "reports": "/api/reports",
                },
            },
        }

    return app
