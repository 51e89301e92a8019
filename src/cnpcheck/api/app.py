"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from cnpcheck.api.error_handlers import register_error_handlers
from cnpcheck.api.routes import cnp, health
from cnpcheck.core.config import AppSettings
from cnpcheck.core.logging import setup_logging
from cnpcheck.core.protocols import IClock
from cnpcheck.services.validator_service import CnpValidatorService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    clock: Optional[IClock] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        setup_logging(settings.log_level, settings.log_format)
        app.state.settings = settings
        app.state.service = CnpValidatorService(settings=settings, clock=clock)
        logger.info("CNP API started", extra={"environment": settings.environment})
        yield

    app = FastAPI(
        title=settings.api.title,
        version="0.1.0",
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(cnp.router, prefix="/cnp")
    return app
